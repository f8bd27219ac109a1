from .untranslated import AuditUntranslatedStep

__all__ = ["AuditUntranslatedStep"]
