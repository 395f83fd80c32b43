"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from .events import Event
from .timestep import Timestep


class Layer:
    """A unit of update, render and event handling.

    The default hooks only keep simple bookkeeping: whether the layer is
    attached, how much frame time it has seen, how many debug-UI frames it
    took part in and how many events reached it.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.ui_frames = 0
        self.events_seen = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame; accumulates the frame time."""
        self.elapsed += float(ts)

    def on_imgui_render(self) -> None:
        """Called once per frame while the debug UI is being built."""
        self.ui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event reaching this layer; counts them."""
        self.events_seen += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers followed by overlays; overlays always stay on top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer`` from the non-overlay part; do nothing if absent."""
        for position, candidate in enumerate(self._layers[: self._insert_index]):
            if candidate is layer:
                layer.on_detach()
                del self._layers[position]
                self._insert_index -= 1
                return

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove ``overlay`` from the overlay part; do nothing if absent."""
        for offset, candidate in enumerate(self._layers[self._insert_index :]):
            if candidate is overlay:
                overlay.on_detach()
                del self._layers[self._insert_index + offset]
                return

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)