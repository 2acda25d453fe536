import logging
from typing import Dict, Optional, Tuple

from PyQt6.QtGui import QIcon, QPixmap
import qtawesome as qta

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

_ICON_CACHE: Dict[Tuple[str, Optional[str], Optional[str]], QIcon] = {}
"""Cache for generated :class:`QIcon` objects.

The cache is unbounded and will grow until cleared via
``IconManager.clear_cache``.
"""

_PIXMAP_CACHE: Dict[Tuple[str, int, Optional[str]], QPixmap] = {}
"""Cache for generated :class:`QPixmap` objects.

This cache has no eviction policy.
"""

DEFAULT_ICON_COLOR = "#DADADA"


class IconManager:
    """Centralized manager for creating icons.

    Icons are cached by ``(icon_name, color, active_color)`` and pixmaps by
    ``(icon_name, size, color)``. Call :meth:`clear_cache` to release memory.
    """

    @staticmethod
    def create_icon(
        icon_name: str,
        color: Optional[str] = None,
        active_color: Optional[str] = None,
    ) -> QIcon:
        """Create a PyQt6 ``QIcon`` from a qtawesome icon name.

        Args:
            icon_name (str): The qtawesome icon name (e.g., 'fa5s.file-import').
            color (str, optional): The color of the icon.
            active_color (str, optional): The color of the icon when active.

        Returns:
            QIcon: A scalable icon; an empty ``QIcon`` if qtawesome fails.
        """
        key = (icon_name, color, active_color)
        if key in _ICON_CACHE:
            return _ICON_CACHE[key]

        base_color = color if color is not None else DEFAULT_ICON_COLOR
        selected_color = active_color if active_color is not None else base_color
        try:
            qta_icon = qta.icon(
                icon_name,
                color=base_color,
                color_active=selected_color,
                color_selected=selected_color,
            )
            result = QIcon(qta_icon) if qta_icon is not None else QIcon()
        except Exception as e:
            logger.warning("Error creating icon %s: %s", icon_name, e)
            result = QIcon()

        _ICON_CACHE[key] = result
        return result

    @staticmethod
    def create_pixmap(icon_name: str, size: int, color: Optional[str] = None) -> QPixmap:
        """Create a ``QPixmap`` of ``size`` pixels from a qtawesome icon name."""
        key = (icon_name, size, color)
        if key in _PIXMAP_CACHE:
            return _PIXMAP_CACHE[key]

        try:
            qta_icon = qta.icon(icon_name, color=color if color is not None else DEFAULT_ICON_COLOR)
            result = qta_icon.pixmap(size, size) if qta_icon is not None else QPixmap()
        except Exception as e:
            logger.warning("Error creating pixmap %s: %s", icon_name, e)
            result = QPixmap()

        _PIXMAP_CACHE[key] = result
        return result

    @staticmethod
    def clear_cache():
        """Clear cached icons and pixmaps."""
        _ICON_CACHE.clear()
        _PIXMAP_CACHE.clear()
