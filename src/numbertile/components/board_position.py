from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    row: int
    col: int

    @property
    def cell(self):
        return (self.row, self.col)
