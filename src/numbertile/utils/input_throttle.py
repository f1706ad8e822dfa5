from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict

from numbertile.constants import MIN_KEY_INTERVAL


@dataclass(slots=True)
class KeyThrottle:
	"""Drops auto-repeated presses of one key that arrive inside ``min_interval``.

	Each key symbol is timed on its own, so LEFT followed quickly by UP both pass.
	"""

	min_interval: float = MIN_KEY_INTERVAL
	clock: Callable[[], float] = field(default=monotonic, repr=False)
	_accepted_at: Dict[int, float] = field(init=False, default_factory=dict, repr=False)

	def allow(self, symbol: int) -> bool:
		now = self.clock()
		last = self._accepted_at.get(symbol)
		if last is not None and (now - last) < self.min_interval:
			return False
		self._accepted_at[symbol] = now
		return True

	def reset(self) -> None:
		self._accepted_at.clear()
