import json

from levelbuilder.builder.schema import LightSpec, SpriteDescriptor
from levelbuilder.builder.spec import GeneratorSpec
from levelbuilder.generators.features import Decoration


def test_descriptor_export_without_lights():
    descriptor = SpriteDescriptor(code="Rock", width=4, height=4, path="assets/rock.png")
    assert descriptor.export() == {
        "code": "Rock",
        "sprite": {"width": 4, "height": 4, "path": "assets/rock.png"},
    }


def test_descriptor_export_with_lights():
    light = LightSpec(x=1.0, y=2.0, color="#ffaa00")
    descriptor = SpriteDescriptor(code="Torch", width=1, height=2, lights=light.export(), path="t.png")
    sprite = json.loads(descriptor.to_json())["sprite"]
    assert list(sprite) == ["width", "height", "lights", "path"]
    assert sprite["lights"] == json.loads(light.to_json())


def test_spec_descriptor_light_fragment_follows_flag():
    spec = GeneratorSpec().reset(Decoration).by_path("d.png").by_height(3)
    assert spec.sprite_descriptor().lights is None
    light = LightSpec(x=0.5, y=0.25)
    spec.by_light_data(light)
    descriptor = spec.sprite_descriptor()
    assert descriptor.lights == light.export()
    assert descriptor.code == "Decoration"
    assert (descriptor.width, descriptor.height) == (3, 3)
