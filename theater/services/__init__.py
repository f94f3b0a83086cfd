from theater.services.statement_service import StatementService, render

__all__ = ["StatementService", "render"]
