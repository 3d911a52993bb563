from typing import List, Sequence, SupportsFloat


def annotate(messages: Sequence[str], sample_rate: SupportsFloat = 1) -> List[str]:
    """Tell StatsD the messages were sampled, e.g. 0.1 means every 10th event was sent"""
    if float(sample_rate) >= 1:
        return list(messages)
    return ["{}|@{}".format(message, sample_rate) for message in messages]
