"""
Theme Manager
Registers theme packs and owns the active theme's registry.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..core import get_logger, get_settings
from ..layering import TemplateManager
from ..registry import ComponentRegistry
from .models import ThemeError, ThemeErrorCode, ThemePack

logger = get_logger(__name__)


@dataclass(frozen=True)
class ThemeChangeEvent:
    old_theme_id: Optional[str]
    new_theme_id: str


ThemeChangeListener = Callable[[ThemeChangeEvent], None]


class ThemeManager:
    """
    Theme registry plus active-theme state.

    An instance, not a process-wide singleton. Activating a theme builds a
    fresh component registry for it and clears the previous theme's.
    """

    def __init__(self, default_theme_id: Optional[str] = None):
        self.default_theme_id = default_theme_id or get_settings().default_theme_id
        self._themes: dict[str, ThemePack] = {}
        self._listeners: list[ThemeChangeListener] = []
        self._active_id: Optional[str] = None
        self._active_registry: Optional[ComponentRegistry] = None
        self._active_templates: Optional[TemplateManager] = None
        # Bumped whenever the theme set changes; consumers key caches on it
        self.revision = 0

    @classmethod
    def with_builtins(cls, default_theme_id: Optional[str] = None) -> "ThemeManager":
        """Manager with the builtin packs registered and the default active"""
        from .builtin import BUILTIN_THEMES

        manager = cls(default_theme_id)
        for theme in BUILTIN_THEMES:
            manager.register(theme)
        if manager.has_theme(manager.default_theme_id):
            manager.set_active_theme(manager.default_theme_id)
        return manager

    # Registration

    def register(self, theme: Union[ThemePack, Mapping[str, Any]]) -> ThemePack:
        """
        Add a theme pack.

        Raises:
            ThemeError: THEME_ALREADY_EXISTS, or INVALID_THEME_PACK for a
                mapping that does not validate
        """
        if not isinstance(theme, ThemePack):
            try:
                theme = ThemePack.model_validate(theme)
            except ValidationError as e:
                theme_id = theme.get("id") if isinstance(theme, Mapping) else None
                raise ThemeError(ThemeErrorCode.INVALID_THEME_PACK, str(e), theme_id) from e

        if theme.id in self._themes:
            raise ThemeError(
                ThemeErrorCode.THEME_ALREADY_EXISTS,
                f'Theme with id "{theme.id}" already exists',
                theme.id,
            )

        self._themes[theme.id] = theme
        self.revision += 1
        logger.info("theme_registered", theme_id=theme.id, components=len(theme.components))
        return theme

    def unregister(self, theme_id: str) -> None:
        """
        Remove a theme pack. Unregistering the active theme falls back to
        the default theme.

        Raises:
            ThemeError: THEME_NOT_FOUND; CANNOT_UNINSTALL_BUILTIN for the
                active default theme; CANNOT_UNINSTALL_ACTIVE when no
                default is available to fall back to
        """
        if theme_id not in self._themes:
            raise ThemeError(ThemeErrorCode.THEME_NOT_FOUND, f'Theme with id "{theme_id}" not found', theme_id)

        if theme_id == self._active_id:
            if theme_id == self.default_theme_id:
                raise ThemeError(
                    ThemeErrorCode.CANNOT_UNINSTALL_BUILTIN,
                    f'Cannot unregister the default theme "{theme_id}"',
                    theme_id,
                )
            if self.default_theme_id not in self._themes:
                raise ThemeError(
                    ThemeErrorCode.CANNOT_UNINSTALL_ACTIVE,
                    f'Cannot unregister active theme "{theme_id}" without a default to fall back to',
                    theme_id,
                )
            self.set_active_theme(self.default_theme_id)

        del self._themes[theme_id]
        self.revision += 1
        logger.info("theme_unregistered", theme_id=theme_id)

    # Queries

    def get_theme(self, theme_id: str) -> Optional[ThemePack]:
        return self._themes.get(theme_id)

    def has_theme(self, theme_id: str) -> bool:
        return theme_id in self._themes

    def list_themes(self) -> list[ThemePack]:
        return list(self._themes.values())

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._themes

    # Activation

    def set_active_theme(self, theme_id: str) -> None:
        """
        Activate a theme, disposing the previous theme's registry.

        Re-activating the current theme is a no-op and emits nothing.

        Raises:
            ThemeError: THEME_NOT_FOUND
        """
        theme = self._themes.get(theme_id)
        if theme is None:
            raise ThemeError(ThemeErrorCode.THEME_NOT_FOUND, f'Theme with id "{theme_id}" not found', theme_id)

        old_id = self._active_id
        if old_id == theme_id:
            return

        if self._active_registry is not None:
            self._active_registry.clear()
        if self._active_templates is not None:
            self._active_templates.clear()

        self._active_registry = theme.create_registry()
        self._active_templates = theme.create_template_manager()
        self._active_id = theme_id
        logger.info("theme_activated", old_theme_id=old_id, new_theme_id=theme_id)

        self._notify(ThemeChangeEvent(old_id, theme_id))

    @property
    def active_theme_id(self) -> Optional[str]:
        return self._active_id

    @property
    def active_theme(self) -> ThemePack:
        """
        Raises:
            ThemeError: THEME_NOT_FOUND when nothing is active
        """
        if self._active_id is None:
            raise ThemeError(ThemeErrorCode.THEME_NOT_FOUND, "No active theme")
        return self._themes[self._active_id]

    @property
    def active_registry(self) -> ComponentRegistry:
        if self._active_registry is None:
            raise ThemeError(ThemeErrorCode.THEME_NOT_FOUND, "No active theme")
        return self._active_registry

    @property
    def active_templates(self) -> TemplateManager:
        if self._active_templates is None:
            raise ThemeError(ThemeErrorCode.THEME_NOT_FOUND, "No active theme")
        return self._active_templates

    def registry_for(self, theme_id: str) -> ComponentRegistry:
        """
        Registry for any registered theme: the live one when it is active,
        otherwise a fresh registry the caller owns.

        Raises:
            ThemeError: THEME_NOT_FOUND
        """
        if theme_id == self._active_id and self._active_registry is not None:
            return self._active_registry
        theme = self._themes.get(theme_id)
        if theme is None:
            raise ThemeError(ThemeErrorCode.THEME_NOT_FOUND, f'Theme with id "{theme_id}" not found', theme_id)
        return theme.create_registry()

    # Events

    def subscribe(self, listener: ThemeChangeListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self, event: ThemeChangeEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                # A faulty listener must not block the others
                logger.error("theme_listener_failed", error=str(e), exc_info=True)
