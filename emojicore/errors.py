class UnsupportedModifierError(Exception):
    """Raised when a skin tone modifier is requested for an emoji that can't take one."""

    def __init__(self, message, emoji=None):
        super().__init__(message)
        self.emoji = emoji
