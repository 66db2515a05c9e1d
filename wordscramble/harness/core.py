"""
Batch autoplay primitives.

- run_round: play one round on a fixed root, submitting a list of guesses.
- run_batch: play many roots in sequence, guessing every vocabulary word
             spellable from each root (an upper bound on the round score).

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Dict, Iterable, List, Tuple

from tqdm import tqdm

from wordscramble.engine import DEFAULT_LOCALE, Dictionary, possible_words
from wordscramble.session import GameSession

logger = logging.getLogger(__name__)


def run_round(session: GameSession, root: str, guesses: Iterable[str]) -> Dict:
    """
    Start a round on `root` and submit every guess in order.

    Returns:
        dict with keys:
            root (str), score (int), accepted (list[str], most recent first),
            rejections (dict reason-name -> count),
            history (list[(guess, outcome)]) where outcome is "ok" or a reason name,
            time_ms (float)
    """
    session.start_new_round([root])

    history: List[Tuple[str, str]] = []
    rejections: Counter = Counter()

    t0 = time.perf_counter_ns()
    for guess in guesses:
        result = session.submit(guess)
        if result.accepted:
            history.append((result.word, "ok"))
        else:
            history.append((result.word, result.reason.name))
            rejections[result.reason.name] += 1
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "root": session.root_word,
        "score": session.score,
        "accepted": list(session.used_words),
        "rejections": dict(rejections),
        "history": history,
        "time_ms": dt,
    }


def run_batch(
        roots: List[str],
        vocabulary: List[str],
        dictionary: Dictionary,
        *,
        locale: str = DEFAULT_LOCALE,
        seed: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Autoplay each root, in the order given, with every vocabulary word
    spellable from it. With progress=True a tqdm bar is shown on stderr.
    """
    session = GameSession(dictionary, locale=locale, seed=seed)
    iterator = tqdm(roots, ncols=80, desc="Playing", unit="root") if progress else roots

    out: List[Dict] = []
    for root in iterator:
        guesses = possible_words(root, vocabulary)
        r = run_round(session, root, guesses)
        logger.debug("root=%s score=%d accepted=%d", r["root"], r["score"], len(r["accepted"]))
        out.append(r)
    return out
