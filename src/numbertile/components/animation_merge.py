from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class MergeAnimation:
    sources: Tuple[Tuple[int,int], Tuple[int,int]]
    dst: Tuple[int,int]
    linear: float = 0.0  # 0..1, sources converge then the result pops
