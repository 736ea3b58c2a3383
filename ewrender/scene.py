"""The bloom demo scene: objects, lights, material and post-processing settings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from .camera import Camera
from .camera_controller import CameraController
from .transform import Transform

_AMBIENT = (0.3, 0.4, 0.46)
_Y_AXIS = (0.0, 1.0, 0.0)


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3).copy()


@dataclass
class Material:
    """Blinn-Phong lighting coefficients."""

    ambient_mod: float = 1.0
    diffuse_mod: float = 0.5
    specular_mod: float = 0.5
    shininess: float = 16.0


@dataclass
class DirLight:
    """A directional light."""

    direction: np.ndarray = field(default_factory=lambda: np.array([0.0, -1.0, 0.0]))
    ambient: np.ndarray = field(default_factory=lambda: np.array(_AMBIENT))
    diffuse: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.direction = _vec3(self.direction)
        self.ambient = _vec3(self.ambient)
        self.diffuse = _vec3(self.diffuse)


@dataclass
class PointLight:
    """A point light with distance attenuation."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    constant: float = 1.0
    linear: float = 0.022
    quadratic: float = 0.0019
    ambient: np.ndarray = field(default_factory=lambda: np.array(_AMBIENT))
    diffuse: np.ndarray = field(default_factory=lambda: np.ones(3))
    intensity: float = 1.0

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.ambient = _vec3(self.ambient)
        self.diffuse = _vec3(self.diffuse)


class BlurSource(Enum):
    """Textures produced by the render passes."""

    COLOR = "color"
    BRIGHTNESS = "brightness"
    PING_PONG_0 = "ping_pong_0"
    PING_PONG_1 = "ping_pong_1"


_PING_PONG = (BlurSource.PING_PONG_0, BlurSource.PING_PONG_1)


def ping_pong_passes(amount: int) -> list[tuple[int, bool, BlurSource]]:
    """The blur passes as ``(target buffer, horizontal, source texture)``."""
    if amount < 0:
        raise ValueError("ping-pong amount must not be negative")
    passes = []
    horizontal = True
    for i in range(amount):
        source = BlurSource.BRIGHTNESS if i == 0 else _PING_PONG[int(not horizontal)]
        passes.append((int(horizontal), horizontal, source))
        horizontal = not horizontal
    return passes


@dataclass
class RenderSettings:
    """HDR and bloom controls."""

    gamma: float = 2.2
    exposure: float = 1.0
    ping_pong_amount: int = 10
    show_brightness_map: bool = False
    show_blur_map: bool = False

    def clamped(self) -> "RenderSettings":
        """A copy with every value held to its slider's range."""
        return replace(
            self,
            gamma=min(max(self.gamma, 0.5), 4.0),
            exposure=min(max(self.exposure, 0.1), 5.0),
            ping_pong_amount=min(max(int(self.ping_pong_amount), 4), 50),
        )

    def post_process_inputs(self) -> tuple[BlurSource, BlurSource]:
        """Textures bound as the screen texture and the bloom blur."""
        if self.show_brightness_map:
            return BlurSource.BRIGHTNESS, BlurSource.BRIGHTNESS
        if self.show_blur_map:
            return BlurSource.PING_PONG_0, BlurSource.PING_PONG_0
        return BlurSource.COLOR, BlurSource.PING_PONG_0


def reset_camera(camera: Camera, controller: CameraController) -> None:
    """Put the camera back at its home position looking at the origin."""
    camera.position = np.array([0.0, 0.0, 5.0])
    camera.target = np.zeros(3)
    controller.yaw = 0.0
    controller.pitch = 0.0


@dataclass
class Scene:
    """Everything the demo draws and the state that drives it."""

    width: int = 1080
    height: int = 720
    camera: Camera = field(default_factory=Camera)
    controller: CameraController = field(default_factory=CameraController)
    material: Material = field(default_factory=Material)
    settings: RenderSettings = field(default_factory=RenderSettings)
    global_light: DirLight = field(default_factory=DirLight)
    glow_cube: PointLight = field(default_factory=PointLight)
    blue_cube: PointLight = field(default_factory=PointLight)
    trala_transform: Transform = field(default_factory=Transform)
    plane_transform: Transform = field(default_factory=Transform)
    cube1_transform: Transform = field(default_factory=Transform)
    cube2_transform: Transform = field(default_factory=Transform)

    @classmethod
    def default(cls, width: int = 1080, height: int = 720) -> "Scene":
        """The demo's starting layout for a window of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        trala = Transform(scale=np.full(3, 0.1))
        cube1 = Transform(position=(2.0, 1.0, 0.0))
        cube2 = Transform(position=(-2.0, 1.0, 0.0))
        camera = Camera(
            position=(0.0, 2.0, 4.0),
            target=(0.0, 0.0, 0.0),
            aspect_ratio=width / height,
            fov=60.0,
        )
        glow = PointLight(
            position=cube1.position, diffuse=(1.0, 1.0, 0.0), intensity=5.0
        )
        blue = PointLight(
            position=cube2.position, diffuse=(0.0, 0.0, 1.0), intensity=10.0
        )
        return cls(
            width=width,
            height=height,
            camera=camera,
            global_light=DirLight(),
            glow_cube=glow,
            blue_cube=blue,
            trala_transform=trala,
            cube1_transform=cube1,
            cube2_transform=cube2,
        )

    def advance(self, delta_time: float) -> None:
        """Spin the model about the Y axis by ``delta_time`` radians."""
        self.trala_transform.rotate(delta_time, _Y_AXIS)

    def lit_uniforms(self) -> dict[str, object]:
        """Uniform values shared by every object drawn with the lit shader."""
        uniforms: dict[str, object] = {
            "_EyePos": self.camera.position.copy(),
            "_ViewProjection": self.camera.projection_matrix() @ self.camera.view_matrix(),
            "_Material.AmbientMod": self.material.ambient_mod,
            "_Material.DiffuseMod": self.material.diffuse_mod,
            "_Material.SpecularMod": self.material.specular_mod,
            "_Material.Shininess": self.material.shininess,
            "_GlobalLight.direction": self.global_light.direction.copy(),
            "_GlobalLight.diffuse": self.global_light.diffuse.copy(),
            "_GlobalLight.ambient": self.global_light.ambient.copy(),
        }
        for prefix, light in (("_Cube1Light", self.glow_cube), ("_Cube2Light", self.blue_cube)):
            uniforms.update({
                f"{prefix}.position": light.position.copy(),
                f"{prefix}.diffuse": light.diffuse.copy(),
                f"{prefix}.ambient": light.ambient.copy(),
                f"{prefix}.constant": light.constant,
                f"{prefix}.linear": light.linear,
                f"{prefix}.quadratic": light.quadratic,
                f"{prefix}.intensity": light.intensity,
            })
        return uniforms

    def resize(self, width: int, height: int) -> None:
        """Record a new framebuffer size."""
        if width < 0 or height < 0:
            raise ValueError("framebuffer size must not be negative")
        self.width = width
        self.height = height