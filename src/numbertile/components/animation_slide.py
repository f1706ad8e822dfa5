from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SlideAnimation:
    src: Tuple[int,int]
    dst: Tuple[int,int]
    linear: float = 0.0  # 0..1
