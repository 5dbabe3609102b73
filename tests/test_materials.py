import pytest

from scenekit.materials import ColorMaterial, Material, TextureMaterial


class RecordingShader:
    def __init__(self):
        self.uniforms = {}

    def set_bool(self, name, value):
        self.uniforms[name] = value

    def set_int(self, name, value):
        self.uniforms[name] = value

    def set_float(self, name, value):
        self.uniforms[name] = value

    def set_vec4(self, name, value):
        self.uniforms[name] = tuple(value)


class RecordingTexture:
    def __init__(self):
        self.bound_units = []
        self.cleaned = 0

    def bind(self, unit):
        self.bound_units.append(unit)

    def cleanup(self):
        self.cleaned += 1


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material()


def test_color_material_binds_color_and_disables_texture():
    shader = RecordingShader()
    ColorMaterial(1.0, 0.5, 0.25, 0.75).bind(shader)
    assert shader.uniforms["material.color"] == (1.0, 0.5, 0.25, 0.75)
    assert shader.uniforms["material.specular"] == 0.75
    assert shader.uniforms["useTexture"] is False


def test_color_material_default_alpha_is_opaque():
    assert ColorMaterial(0.1, 0.2, 0.3).color == (0.1, 0.2, 0.3, 1.0)


def test_specular_change_is_uploaded():
    shader = RecordingShader()
    material = ColorMaterial(0.0, 0.0, 0.0)
    material.specular = 0.3
    material.bind(shader)
    assert shader.uniforms["material.specular"] == 0.3


def test_texture_material_binds_texture_unit_zero():
    shader = RecordingShader()
    texture = RecordingTexture()
    TextureMaterial(texture).bind(shader)
    assert texture.bound_units == [0]
    assert shader.uniforms["material.texture_diffuse"] == 0
    assert shader.uniforms["useTexture"] is True
    assert shader.uniforms["material.color"] == (1.0, 1.0, 1.0, 1.0)


def test_texture_material_without_texture_only_sets_color():
    shader = RecordingShader()
    TextureMaterial(None).bind(shader)
    assert "useTexture" not in shader.uniforms
    assert "material.texture_diffuse" not in shader.uniforms
    assert shader.uniforms["material.specular"] == 0.75


def test_texture_material_cleanup_releases_texture():
    texture = RecordingTexture()
    material = TextureMaterial(texture)
    material.cleanup()
    assert texture.cleaned == 1