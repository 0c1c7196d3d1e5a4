"""Cinema Domain Enums"""

from src.service.cinema.domain.enum.export_scope import ExportScope
from src.service.cinema.domain.enum.screening_order import ScreeningOrder

__all__ = ['ExportScope', 'ScreeningOrder']
