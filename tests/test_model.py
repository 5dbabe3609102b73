import math

import numpy as np
import pytest

from scenekit.materials import ColorMaterial
from scenekit.mesh import Mesh, MeshType
from scenekit.model import Model
from scenekit.transformations import Scale, Translation


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

    def set_mat4(self, name, value):
        self.uniforms[name] = np.array(value)


class CountingMaterial(ColorMaterial):
    def __init__(self):
        super().__init__(0.2, 0.4, 0.6)
        self.cleaned = 0

    def cleanup(self):
        self.cleaned += 1


def test_new_model_has_identity_matrix_and_empty_chain():
    model = Model()
    assert len(model.transformations) == 0
    assert np.allclose(model.model_matrix(), np.eye(4))


def test_set_position_puts_offset_in_matrix():
    model = Model()
    model.set_position(1.0, 2.0, 3.0)
    assert len(model.transformations) == 1
    assert np.allclose(model.model_matrix()[:3, 3], [1.0, 2.0, 3.0])


def test_vector_and_component_forms_agree():
    a, b = Model(), Model()
    a.set_position(1.0, -2.0, 0.5)
    b.set_position((1.0, -2.0, 0.5))
    assert np.allclose(a.model_matrix(), b.model_matrix())


def test_uniform_scale():
    model = Model()
    model.set_scale(2.0)
    assert np.allclose(model.scale, [2.0, 2.0, 2.0])
    assert np.allclose(model.model_matrix(), np.diag([2.0, 2.0, 2.0, 1.0]))


def test_position_rejects_single_number():
    with pytest.raises(TypeError):
        Model().set_position(1.0)


def test_position_rejects_wrong_length_vector():
    with pytest.raises(ValueError):
        Model().set_position((1.0, 2.0))


def test_translate_and_rotate_accumulate():
    model = Model()
    model.translate(1.0, 0.0, 0.0)
    model.translate((0.0, 2.0, 0.0))
    model.rotate(0.0, 0.0, 0.25)
    model.rotate(0.0, 0.0, 0.25)
    assert np.allclose(model.position, [1.0, 2.0, 0.0])
    assert np.allclose(model.rotation, [0.0, 0.0, 0.5])


def test_composite_matches_basic_matrix_for_z_rotation():
    model = Model()
    model.set_position(0.5, 0.2, 0.0)
    model.set_rotation(0.0, 0.0, 0.785)
    model.set_scale(1.5, 1.0, 1.0)
    assert len(model.transformations) == 3
    assert np.allclose(model.model_matrix(), model.basic_model_matrix())


def test_basic_matrix_maps_point_through_scale_then_rotation_then_translation():
    model = Model()
    model.set_scale(2.0)
    model.set_rotation(0.0, 0.0, math.pi / 2)
    model.set_position(1.0, 0.0, 0.0)
    point = model.basic_model_matrix() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [1.0, 2.0, 0.0, 1.0])


def test_added_transformation_applies_after_basic_ones():
    model = Model()
    model.set_scale(2.0)
    model.add_transformation(Translation(1.0, 0.0, 0.0))
    point = model.model_matrix() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [3.0, 0.0, 0.0, 1.0])


def test_added_transformation_in_front_applies_first():
    model = Model()
    model.set_scale(2.0)
    model.add_transformation_front(Translation(1.0, 0.0, 0.0))
    point = model.model_matrix() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(point, [4.0, 0.0, 0.0, 1.0])


def test_changing_placement_drops_added_transformations():
    model = Model()
    model.add_transformation(Scale(3.0, 3.0, 3.0))
    model.set_position(1.0, 1.0, 1.0)
    assert len(model.transformations) == 1
    assert np.allclose(model.model_matrix(), model.basic_model_matrix())


def test_clear_transformations_keeps_basic_placement():
    model = Model()
    model.set_position(0.0, 4.0, 0.0)
    model.add_transformation(Scale(3.0, 3.0, 3.0))
    model.clear_transformations()
    assert len(model.transformations) == 1
    assert np.allclose(model.model_matrix()[:3, 3], [0.0, 4.0, 0.0])


def test_simplify_preserves_matrix():
    model = Model()
    model.set_position(1.0, 2.0, 3.0)
    model.set_rotation(0.3, 0.2, 0.1)
    model.set_scale(0.5)
    before = model.model_matrix()
    model.simplify_transformations()
    assert len(model.transformations) == 1
    assert np.allclose(model.model_matrix(), before)


def test_get_mesh():
    mesh = Mesh.triangle()
    model = Model(mesh)
    assert model.get_mesh(0) is mesh
    assert model.get_mesh(1) is None
    assert model.get_mesh(-1) is None


def test_bind_material_uploads_material_and_model_matrix():
    shader = RecordingShader()
    model = Model()
    model.set_position(1.0, 2.0, 3.0)
    model.material = ColorMaterial(0.2, 0.4, 0.6)
    model.bind_material(shader)
    assert shader.uniforms["material.color"] == (0.2, 0.4, 0.6, 1.0)
    assert np.allclose(shader.uniforms["model"], model.model_matrix())


def test_bind_without_material_still_sets_model_matrix():
    shader = RecordingShader()
    Model().bind_material(shader)
    assert set(shader.uniforms) == {"model"}
    assert np.allclose(shader.uniforms["model"], np.eye(4))


def test_cleanup_releases_everything():
    model = Model.create_square()
    material = CountingMaterial()
    model.material = material
    model.shader = RecordingShader()
    model.set_position(1.0, 0.0, 0.0)
    model.cleanup()
    assert model.meshes == []
    assert len(model.transformations) == 0
    assert material.cleaned == 1
    assert model.material is None
    assert model.shader is None


def test_factories_wrap_meshes():
    assert Model.create_triangle().get_mesh(0).vertex_count() == 3
    square = Model.create_square(MeshType.UV).get_mesh(0)
    assert square.index_count() == 6
    assert square.mesh_type is MeshType.UV
    assert Model.create_circle(2.0, 8).get_mesh(0).vertex_count() == 10