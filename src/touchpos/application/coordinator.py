# src/touchpos/application/coordinator.py
"""
Application coordinator for the touch POS front end.

Owns the current-screen state, sequences startup, routes domain events to
the cart and to navigation, and switches theme variants.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Optional, Union

from touchpos.application.ports.collaborators import CartPort, ScreenManagerPort, StoragePort
from touchpos.application.registries.theme_registry import (
    ThemeRegistry,
    ThemeVariant,
    default_theme_registry,
)
from touchpos.config import TouchPosConfig
from touchpos.core.errors import InitializationError, NavigationError, Result, ThemeLoadError
from touchpos.core.events import (
    AddToCart,
    ClearCart,
    DomainEvent,
    EventBus,
    EventKind,
    Navigate,
    RemoveFromCart,
    UpdateCart,
)
from touchpos.core.pipeline import Pipeline, PipelineResult, PipelineStage
from touchpos.core.state import ApplicationState
from touchpos.infrastructure.cart import CartManager
from touchpos.infrastructure.display import AppContainer, ScreenManager
from touchpos.infrastructure.event_log import create_event_log
from touchpos.infrastructure.storage import StorageManager

logger = logging.getLogger(__name__)


class AppCoordinator:
    """
    Coordinates storage, cart and screens.

    Usage:
        app = AppCoordinator()
        result = await app.init()
        await app.dispatch(AddToCart(product={"id": "p1", "price": "2.50"}))
        await app.dispatch(Navigate(screen="cart"))
        await app.load_theme(ThemeVariant.restaurant)
    """

    def __init__(
        self,
        *,
        storage: Optional[StoragePort] = None,
        cart: Optional[CartPort] = None,
        screen_manager: Optional[ScreenManagerPort] = None,
        container: Optional[AppContainer] = None,
        config: Optional[TouchPosConfig] = None,
        theme_registry: Optional[ThemeRegistry] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.config = config or TouchPosConfig()
        app_cfg = self.config.app

        if container is None:
            candidate = getattr(screen_manager, "container", None)
            container = candidate if isinstance(candidate, AppContainer) else AppContainer(app_cfg.container_id)
        self.container = container

        self.storage_manager = storage or StorageManager(
            self.config.storage.path,
            catalog_path=self.config.storage.catalog_path,
            settings_overrides={
                "tax_rate": self.config.cart.tax_rate,
                "currency": self.config.cart.currency,
            },
        )
        self.cart_manager = cart or CartManager(default_tax_rate=self.config.cart.tax_rate)
        self.screen_manager = screen_manager or ScreenManager(
            self.container, title_suffix=app_cfg.title_suffix
        )
        self.events = event_bus or EventBus(create_event_log(app_cfg.event_log))
        self.themes = theme_registry or default_theme_registry()

        self.state = ApplicationState()
        self.theme_screen: Any = None
        self.last_startup_report: Optional[PipelineResult] = None
        self._listeners_registered = False

    # ==================== Startup ====================

    async def init(self) -> Result[ApplicationState, InitializationError]:
        """
        Run the startup sequence: storage -> cart -> screens -> event
        subscriptions -> initial screen. Stops at the first failing stage.
        """
        if self.state.is_initialized:
            logger.warning("POS application already initialized")
            return Result.ok(self.state)

        logger.info("Initializing POS application...")
        pipeline = (
            Pipeline("startup")
            .add_stage(PipelineStage("storage", self._init_storage))
            .add_stage(PipelineStage("cart", self._init_cart))
            .add_stage(PipelineStage("screens", self._init_screens))
            .add_stage(PipelineStage("events", self._setup_event_listeners))
            .add_stage(PipelineStage("initial_screen", self._load_initial_screen))
        )
        report = await pipeline.run(self)
        self.last_startup_report = report

        if report.failed():
            stage = report.failed_stage
            logger.error(f"Failed to initialize POS application at stage '{stage.name}': {stage.error}")
            return Result.err(
                InitializationError(
                    message=f"Startup failed at stage '{stage.name}': {stage.error}",
                    context={"stage": stage.name, "completed": report.stage_names()[:-1]},
                )
            )

        self.state.mark_initialized()
        logger.info("POS application initialized successfully")
        return Result.ok(self.state)

    async def _init_storage(self, _ctx: Any) -> None:
        await self.storage_manager.init()

    async def _init_cart(self, _ctx: Any) -> None:
        await self.cart_manager.init(self.storage_manager)

    async def _init_screens(self, _ctx: Any) -> None:
        outcome = self.screen_manager.init(self)
        if inspect.isawaitable(outcome):
            await outcome

    def _setup_event_listeners(self, _ctx: Any = None) -> None:
        # Subscriptions survive a failed init; never register twice
        if self._listeners_registered:
            return
        for kind, handler in self._dispatch_table().items():
            self.events.subscribe(kind, handler)
        self._listeners_registered = True

    async def _load_initial_screen(self, _ctx: Any) -> None:
        # Navigation failures are non-fatal; startup still completes
        nav = await self.navigate_to(self.config.app.default_screen)
        if nav.is_err():
            logger.error(f"Initial screen failed to load: {nav.error}")

    # ==================== Event handlers ====================

    def _dispatch_table(self) -> Dict[EventKind, Callable[[Any], Any]]:
        return {
            EventKind.NAVIGATE: self._on_navigate,
            EventKind.ADD_TO_CART: self._on_add_to_cart,
            EventKind.UPDATE_CART: self._on_update_cart,
            EventKind.REMOVE_FROM_CART: self._on_remove_from_cart,
            EventKind.CLEAR_CART: self._on_clear_cart,
        }

    async def _on_navigate(self, event: Navigate) -> None:
        await self.navigate_to(event.screen, event.data)

    def _on_add_to_cart(self, event: AddToCart) -> None:
        self.cart_manager.add_item(event.product)

    def _on_update_cart(self, event: UpdateCart) -> None:
        self.cart_manager.update_quantity(event.item_id, event.quantity)

    def _on_remove_from_cart(self, event: RemoveFromCart) -> None:
        self.cart_manager.remove_item(event.item_id)

    def _on_clear_cart(self, event: ClearCart) -> None:
        self.cart_manager.clear()

    async def dispatch(self, event: DomainEvent) -> int:
        """Publish an event on the coordinator's bus."""
        return await self.events.publish(event)

    # ==================== Navigation ====================

    async def navigate_to(
        self, screen_name: str, data: Optional[Dict[str, Any]] = None
    ) -> Result[str, NavigationError]:
        """
        Show a screen. ``current_screen`` is updated before the mount and
        stays on the target even if mounting fails.
        """
        logger.info(f"Navigating to: {screen_name}")
        self.state.mark_navigating(screen_name)
        try:
            await self.screen_manager.show_screen(screen_name, data if data is not None else {})
        except Exception as e:
            logger.error(f"Failed to navigate to {screen_name}: {e}")
            return Result.err(
                NavigationError(
                    message=f"Failed to navigate to {screen_name}: {e}",
                    context={"screen": screen_name},
                )
            )
        return Result.ok(screen_name)

    # ==================== Themes ====================

    async def load_theme(self, variant: Union[ThemeVariant, str]) -> Result[ThemeVariant, ThemeLoadError]:
        """
        Switch to a theme variant.

        Screen-backed themes replace the container only after ``render()``
        succeeds; themes without a screen navigate to their home screen.
        """
        try:
            key = ThemeVariant(variant)
        except ValueError:
            logger.error(f"Unknown theme: {variant!r}")
            return Result.err(ThemeLoadError(message=f"Unknown theme: {variant!r}"))

        desc = self.themes.get(key)
        if desc is None:
            logger.error(f"Theme not registered: {key.value}")
            return Result.err(ThemeLoadError(message=f"Theme not registered: {key.value}"))

        logger.info(f"Loading {key.value} theme...")
        if desc.uses_navigation:
            nav = await self.navigate_to(desc.home_screen)
            if nav.is_err():
                logger.error(f"Failed to load {key.value} theme: {nav.error}")
                return Result.err(
                    ThemeLoadError(message=f"Failed to load {key.value} theme: {nav.error}", context={"theme": key.value})
                )
        else:
            try:
                screen_cls = self.themes.resolve(key)
                screen = screen_cls(self)
                markup = await screen.render()
            except Exception as e:
                logger.error(f"Failed to load {key.value} theme: {e}")
                return Result.err(
                    ThemeLoadError(message=f"Failed to load {key.value} theme: {e}", context={"theme": key.value})
                )

            # Container now shows the theme; state follows it even if after_render fails
            self.container.replace(markup)
            self.theme_screen = screen
            self.state.mark_theme(key)
            try:
                await screen.after_render()
            except Exception as e:
                logger.error(f"Theme {key.value} mounted but after_render failed: {e}")
                return Result.err(
                    ThemeLoadError(
                        message=f"Theme {key.value} mounted but after_render failed: {e}",
                        context={"theme": key.value, "mounted": True},
                    )
                )

        self.state.mark_theme(key)
        logger.info(f"{desc.title or key.value} theme loaded successfully")
        return Result.ok(key)

    async def load_restaurant_theme(self) -> Result[ThemeVariant, ThemeLoadError]:
        return await self.load_theme(ThemeVariant.restaurant)

    async def load_express_theme(self) -> Result[ThemeVariant, ThemeLoadError]:
        return await self.load_theme(ThemeVariant.express)

    async def load_evolution_theme(self) -> Result[ThemeVariant, ThemeLoadError]:
        return await self.load_theme(ThemeVariant.evolution)

    async def load_oblivion_theme(self) -> Result[ThemeVariant, ThemeLoadError]:
        return await self.load_theme(ThemeVariant.oblivion)

    # ==================== Accessors ====================

    def get_cart_manager(self) -> CartPort:
        return self.cart_manager

    def get_storage_manager(self) -> StoragePort:
        return self.storage_manager

    def get_screen_manager(self) -> ScreenManagerPort:
        return self.screen_manager

    def get_current_screen(self) -> Optional[str]:
        return self.state.current_screen

    @property
    def is_initialized(self) -> bool:
        return self.state.is_initialized
