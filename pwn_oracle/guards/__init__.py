"""Guards — предусловия, которые должны выполниться до чтения любых цен.

- SequencerLivenessGuard: L2 sequencer работает дольше grace period
"""

from .sequencer_liveness import SequencerLivenessGuard, SequencerLivenessResult

__all__ = [
    "SequencerLivenessGuard",
    "SequencerLivenessResult",
]
