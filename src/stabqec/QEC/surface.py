from .stabcode import StabCode


class Surface(StabCode):
    """
    The rotated surface code.

    `size` is the number of plaquettes along each side, so the data qubits
    form a (size+1) x (size+1) grid, qubit (r, c) having index r*(size+1)+c.
    Plaquette (i, j), 0 <= i, j <= size+1, touches the qubits (i-1, j-1),
    (i-1, j), (i, j-1), (i, j) that exist, and is X-type when i+j is even,
    Z-type otherwise. Weight-two plaquettes are kept only on the boundaries
    of their type: X on top and bottom, Z on left and right.

    The code is [[(size+1)^2, 1, size+1]]. Logical X acts on the first
    column, logical Z on the first row.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Surface code size must be at least 1, got {size}.")
        self._size = size
        self._side = size + 1
        super().__init__(self._side * self._side, 1, self._side)
        self.construct_stabilizers()
        self.construct_logicals()

    @property
    def size(self) -> int:
        return self._size

    def _qubit(self, row: int, col: int) -> int:
        return row * self._side + col

    def construct_stabilizers(self):
        """
        Construct the plaquette stabilizers, row by row.
        """
        side = self._side
        for i in range(side + 1):
            for j in range(side + 1):
                pauli = 1 if (i + j) % 2 == 0 else 3
                on_row_edge = i in (0, side)
                on_col_edge = j in (0, side)
                if on_row_edge and on_col_edge:
                    continue
                if on_row_edge and pauli != 1:
                    continue
                if on_col_edge and pauli != 3:
                    continue
                stab = [0] * self.n
                for row in (i - 1, i):
                    for col in (j - 1, j):
                        if 0 <= row < side and 0 <= col < side:
                            stab[self._qubit(row, col)] = pauli
                self.add_stab(stab)

    def construct_logicals(self):
        """
        Logical X on the first column, logical Z on the first row.
        """
        logical_x = [0] * self.n
        logical_z = [0] * self.n
        for t in range(self._side):
            logical_x[self._qubit(t, 0)] = 1
            logical_z[self._qubit(0, t)] = 3
        self.set_logical_X(0, logical_x)
        self.set_logical_Z(0, logical_z)


def surface_code(size: int) -> Surface:
    """
    Surface code of linear size `size` (plaquettes per side).
    """
    return Surface(size)
