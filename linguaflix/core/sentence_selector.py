import random
from typing import Optional, Sequence


def select_sentence(sentences: Sequence[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Pick one sentence uniformly at random.

    Args:
        sentences: Accepted sentences
        rng: Random source (default: the module-level generator, unseeded)

    Returns:
        The chosen sentence, or None when there is nothing to choose from
    """
    if not sentences:
        return None
    return (rng or random).choice(sentences)
