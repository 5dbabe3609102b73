"""Surface materials that push their parameters into a shader's uniforms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

__all__ = ["UniformTarget", "TextureLike", "Material", "ColorMaterial", "TextureMaterial"]

DEFAULT_SPECULAR = 0.75
_TEXTURE_UNIT = 0


class UniformTarget(Protocol):
    """The uniform setters a material needs from a shader."""

    def set_bool(self, name: str, value: bool) -> None: ...

    def set_int(self, name: str, value: int) -> None: ...

    def set_float(self, name: str, value: float) -> None: ...

    def set_vec4(self, name: str, value: tuple[float, float, float, float]) -> None: ...


class TextureLike(Protocol):
    """A texture that can be bound to a texture unit and released."""

    def bind(self, unit: int) -> None: ...

    def cleanup(self) -> None: ...


class Material(ABC):
    """Base material with an RGBA colour and a specular strength."""

    def __init__(self) -> None:
        self.specular: float = DEFAULT_SPECULAR
        self.color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)

    @abstractmethod
    def bind(self, shader: UniformTarget) -> None:
        """Upload this material's parameters to ``shader``."""

    def cleanup(self) -> None:
        """Release any resources held by the material."""


class ColorMaterial(Material):
    """A flat colour with no texture."""

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        super().__init__()
        self.color = (float(r), float(g), float(b), float(a))

    def bind(self, shader: UniformTarget) -> None:
        shader.set_vec4("material.color", self.color)
        shader.set_float("material.specular", self.specular)
        shader.set_bool("useTexture", False)


class TextureMaterial(Material):
    """A material sampling a diffuse texture, tinted by its colour."""

    def __init__(self, texture: TextureLike | None) -> None:
        super().__init__()
        self.texture = texture

    def bind(self, shader: UniformTarget) -> None:
        if self.texture is not None:
            self.texture.bind(_TEXTURE_UNIT)
            shader.set_int("material.texture_diffuse", _TEXTURE_UNIT)
            shader.set_bool("useTexture", True)
        shader.set_vec4("material.color", self.color)
        shader.set_float("material.specular", self.specular)

    def cleanup(self) -> None:
        if self.texture is not None:
            self.texture.cleanup()