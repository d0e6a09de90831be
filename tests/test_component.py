from spacegame.component import Component
from spacegame.node import Node


class Tracking(Component):
    def __init__(self, node):
        super().__init__(node)
        self.events = []

    def on_attached(self):
        self.events.append("attached")

    def on_detached(self):
        self.events.append("detached")


class Other(Component):
    pass


def test_new_component_is_enabled_and_knows_its_node():
    node = Node()
    component = node.add_component(Tracking)
    assert component.enabled is True
    assert component.node is node


def test_detach_removes_component_and_fires_hook():
    node = Node()
    component = node.add_component(Tracking)
    component.detach()
    assert node.get_component(Tracking) is None
    assert component.events == ["attached", "detached"]


def test_detach_leaves_other_components_in_place():
    node = Node()
    component = node.add_component(Tracking)
    other = node.add_component(Other)
    component.detach()
    assert node.get_component(Other) is other
    assert list(node.components.values()) == [other]


def test_detaching_twice_fires_hook_once():
    node = Node()
    component = node.add_component(Tracking)
    component.detach()
    component.detach()
    assert component.events.count("detached") == 1