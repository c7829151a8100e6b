from dataclasses import dataclass


@dataclass
class Vector:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Tensor:
    xx: float = 0.0
    xy: float = 0.0
    xz: float = 0.0
    yx: float = 0.0
    yy: float = 0.0
    yz: float = 0.0
    zx: float = 0.0
    zy: float = 0.0
    zz: float = 0.0
