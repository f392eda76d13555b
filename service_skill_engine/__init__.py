"""Voice skill engine answering questions about cloud services."""

SERVICE_SKILL_VERSION = "1.0.0"

__all__ = ["SERVICE_SKILL_VERSION"]
