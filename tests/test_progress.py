import io

from genderize.ui.progress import FRAMES, ProgressIndicator


def test_frames_cycle_from_first():
    progress = ProgressIndicator(io.StringIO())
    drawn = [progress.tick() for _ in range(7)]
    assert drawn == ['.  ', '.. ', '...', '.  ', '.. ', '...', '.  ']
    assert progress.frames == drawn


def test_frames_overwrite_current_line():
    stream = io.StringIO()
    progress = ProgressIndicator(stream, label='waiting')
    for _ in range(3):
        progress.tick()
    assert stream.getvalue() == '\rwaiting.  \rwaiting.. \rwaiting...'


def test_frames_are_same_width():
    assert len({len(f) for f in FRAMES}) == 1
