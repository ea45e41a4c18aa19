'''Console helpers.'''

from genderize.ui.progress import FRAMES, ProgressIndicator

__all__ = ['FRAMES', 'ProgressIndicator']
