"""
Scramble generation for the 3x3 cube
"""

import random
from typing import List, Optional, Sequence

from .config import MAX_RESAMPLE_ATTEMPTS, SCRAMBLE_LENGTH

FACES = ["U", "D", "L", "R", "F", "B"]
MODIFIERS = ["", "2", "'"]

# Opposite faces turn around the same axis
AXIS = {"U": 0, "D": 0, "L": 1, "R": 1, "F": 2, "B": 2}

# Process-wide source, seeded from system entropy
_default_rng = random.Random()


def face_of(move: str) -> str:
    return move[0]


def is_allowed(face: str, previous: Sequence[str]) -> bool:
    """Check a face against the faces already in the scramble"""
    if not previous:
        return True
    last = previous[-1]
    if face == last:
        return False
    # R L R: the outer pair would cancel into one turn
    if len(previous) >= 2 and AXIS[last] == AXIS[face] and previous[-2] == face:
        return False
    return True


def is_valid_sequence(moves: Sequence[str]) -> bool:
    faces = [face_of(m) for m in moves]
    return all(is_allowed(face, faces[:i]) for i, face in enumerate(faces))


class Scrambler:
    """Random-move scramble generator"""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None,
                 length: int = SCRAMBLE_LENGTH):
        if rng is None:
            rng = random.Random(seed) if seed is not None else _default_rng
        self.rng = rng
        self.length = length

    def _next_face(self, faces: List[str]) -> str:
        for _ in range(MAX_RESAMPLE_ATTEMPTS):
            face = self.rng.choice(FACES)
            if is_allowed(face, faces):
                return face
        # Bound hit; draw from what is still legal
        return self.rng.choice([f for f in FACES if is_allowed(f, faces)])

    def moves(self) -> List[str]:
        faces: List[str] = []
        moves = []
        for _ in range(self.length):
            face = self._next_face(faces)
            faces.append(face)
            moves.append(face + self.rng.choice(MODIFIERS))
        return moves

    def generate(self) -> str:
        return " ".join(self.moves())
