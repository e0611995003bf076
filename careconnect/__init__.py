"""CareConnect backend: account signup, login with JWT issuance, and a chat-completion proxy."""

__version__ = "0.1.0"
