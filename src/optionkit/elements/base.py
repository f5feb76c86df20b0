"""Base class for interactive menu elements.

UIElement carries what every element in a config menu shares: geometry, a
description, the framework init flag and the lifecycle hooks that the menu
drives each frame. Subclasses extend the hooks and must call the base
implementation first.

Example:
    Creating a custom element::

        class Label(UIElement):
            def update(self, dt):
                super().update(dt)
                self.elapsed += dt
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import TYPE_CHECKING

from arcade.types import LBWH

if TYPE_CHECKING:
    from arcade.types import Point2, Rect

    from optionkit.context import MenuContext

logger = logging.getLogger(__name__)


class UIElement(ABC):  # noqa: B024
    """Base class for all elements hosted by a config menu.

    Elements are either rectangular (position plus size) or circular (position
    plus radius). Position is always the bottom-left corner, also for circles.

    Attributes:
        context: Shared state of the owning menu.
        rect: Bounding rectangle of the element.
        rad: Radius for circular elements, 0.0 for rectangular ones.
        description: Text shown while the element is hovered.
        show_desc: Set by the host while the description should be displayed.
        hidden: Whether the host currently hides the element.
    """

    def __init__(
        self,
        pos: Point2,
        size: Point2 | float,
        *,
        context: MenuContext,
        description: str = "",
    ) -> None:
        """Initialize geometry and generic interaction state.

        Args:
            pos: Bottom-left position.
            size: (width, height) for a rectangular element, or a radius for a circular one.
            context: Shared state of the owning menu.
            description: Text shown while the element is hovered.

        Raises:
            ValueError: If the size or radius is not positive.
        """
        if isinstance(size, (int, float)):
            if size <= 0:
                msg = f"Radius must be positive, got {size}"
                raise ValueError(msg)
            self.rad = float(size)
            self.rect: Rect = LBWH(pos[0], pos[1], 2.0 * self.rad, 2.0 * self.rad)
        else:
            if size[0] <= 0 or size[1] <= 0:
                msg = f"Size must be positive, got {tuple(size)}"
                raise ValueError(msg)
            self.rad = 0.0
            self.rect = LBWH(pos[0], pos[1], size[0], size[1])

        self.context = context
        self.description = description
        self.show_desc = False
        self.hidden = False
        self._initialized = False

    @property
    def is_circle(self) -> bool:
        """Whether the element was built from a radius."""
        return self.rad > 0.0

    @property
    def initialized(self) -> bool:
        """Whether the framework init step has run."""
        return self._initialized

    def initialize(self) -> None:
        """Framework-driven init step, called by the owning tab.

        Idempotent.
        """
        self._initialized = True

    def reset(self) -> None:  # noqa: B027
        """Clear generic interaction state."""
        self.show_desc = False

    def on_change(self) -> None:  # noqa: B027
        """Generic change hook."""
        logger.debug("%s changed", type(self).__name__)

    def update(self, dt: float) -> None:  # noqa: B027
        """Called every frame by the owning tab.

        Args:
            dt: Time elapsed since the last frame, in seconds.
        """

    def graf_update(self, dt: float) -> None:  # noqa: B027
        """Called every frame for graphical updates, after update().

        Args:
            dt: Time elapsed since the last frame, in seconds.
        """
