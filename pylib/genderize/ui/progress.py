'''Single-line "waiting" animation, redrawn in place with carriage returns.'''

import sys
from typing import TextIO

FRAMES = ('.  ', '.. ', '...')


class ProgressIndicator:
    '''Cycles through FRAMES, one per tick, overwriting the current terminal line.'''

    def __init__(self, stream: TextIO | None = None, label: str = 'waiting for response') -> None:
        self._stream = stream
        self.label = label
        self.frames: list[str] = []
        self._index = 0

    @property
    def stream(self) -> TextIO:
        # Resolved at write time so a swapped sys.stdout is honored
        return self._stream or sys.stdout

    def tick(self) -> str:
        '''Draw the next frame and return it.'''
        frame = FRAMES[self._index]
        self._index = (self._index + 1) % len(FRAMES)
        self.stream.write('\r' + self.label + frame)
        self.stream.flush()
        self.frames.append(frame)
        return frame
