from vexengine.layers import Layer, LayerStack


class RecordingLayer(Layer):
    def __init__(self, name, journal):
        super().__init__(name)
        self.journal = journal

    def on_attach(self):
        self.journal.append(("attach", self.name))

    def on_detach(self):
        self.journal.append(("detach", self.name))


def names(stack):
    return [layer.name for layer in stack]


def test_default_layer_name():
    assert Layer().name == "Layer"
    assert Layer("Example").name == "Example"


def test_layers_stay_below_overlays():
    stack = LayerStack()
    stack.push_overlay(Layer("o1"))
    stack.push_layer(Layer("l1"))
    stack.push_layer(Layer("l2"))
    stack.push_overlay(Layer("o2"))
    assert names(stack) == ["l1", "l2", "o1", "o2"]
    assert len(stack) == 4


def test_reversed_order():
    stack = LayerStack()
    stack.push_layer(Layer("l1"))
    stack.push_overlay(Layer("o1"))
    assert [layer.name for layer in reversed(stack)] == ["o1", "l1"]


def test_push_calls_attach():
    journal = []
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(RecordingLayer("b", journal))
    assert journal == [("attach", "a"), ("attach", "b")]


def test_pop_layer_detaches_and_keeps_insert_point():
    journal = []
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    stack.push_layer(a)
    stack.push_overlay(Layer("o"))
    stack.pop_layer(a)
    assert ("detach", "a") in journal
    stack.push_layer(Layer("c"))
    assert names(stack) == ["c", "o"]


def test_pop_layer_ignores_overlay():
    journal = []
    stack = LayerStack()
    overlay = RecordingLayer("o", journal)
    stack.push_layer(Layer("l"))
    stack.push_overlay(overlay)
    stack.pop_layer(overlay)
    assert names(stack) == ["l", "o"]
    assert ("detach", "o") not in journal


def test_pop_overlay():
    journal = []
    stack = LayerStack()
    overlay = RecordingLayer("o", journal)
    stack.push_layer(Layer("l"))
    stack.push_overlay(overlay)
    stack.pop_overlay(overlay)
    assert names(stack) == ["l"]
    assert journal[-1] == ("detach", "o")


def test_pop_overlay_ignores_layer():
    stack = LayerStack()
    layer = Layer("l")
    stack.push_layer(layer)
    stack.pop_overlay(layer)
    assert names(stack) == ["l"]


def test_pop_missing_is_noop():
    stack = LayerStack()
    stack.push_layer(Layer("l"))
    stack.pop_layer(Layer("other"))
    stack.pop_overlay(Layer("other"))
    assert len(stack) == 1


def test_iteration_is_snapshot():
    stack = LayerStack()
    stack.push_layer(Layer("a"))
    seen = []
    for layer in stack:
        seen.append(layer.name)
        stack.push_overlay(Layer("x"))
    assert seen == ["a"]
    assert len(stack) == 2