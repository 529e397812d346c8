"""Per-target request sequencing for stale-response suppression."""

from collections import OrderedDict, defaultdict


class RequestSequencer:
    """
    Hands out increasing tickets per target.

    A response is applied only if its ticket is still the latest one issued
    for the same target, so a slow older request can never overwrite the
    result of a newer one.
    """

    def __init__(self) -> None:
        """Initialize with no issued tickets."""
        self._latest: defaultdict[str, int] = defaultdict(int)

    def issue(self, target: str) -> int:
        """
        Issue a ticket for a new request.

        Args:
            target: Request target (e.g. 'makes', 'search')

        Returns:
            Ticket number
        """
        self._latest[target] += 1
        return self._latest[target]

    def is_current(self, target: str, ticket: int) -> bool:
        """Whether no newer request was issued for the target."""
        return self._latest[target] == ticket

    def latest(self, target: str) -> int:
        """Latest ticket issued for the target (0 if none)."""
        return self._latest[target]


class RequestSequencerRegistry:
    """
    One RequestSequencer per page session.

    Each HTTP call builds a fresh controller, so overlapping calls from the same
    page only see each other's tickets through a shared sequencer. The least
    recently used pages are forgotten once max_pages is exceeded.
    """

    def __init__(self, max_pages: int = 1000) -> None:
        """
        Initialize registry.

        Args:
            max_pages: Number of page sessions tracked at once

        Raises:
            ValueError: If max_pages is not positive
        """
        if max_pages < 1:
            raise ValueError(f"max_pages must be positive, got {max_pages}")
        self._max_pages = max_pages
        self._sequencers: OrderedDict[str, RequestSequencer] = OrderedDict()

    def for_page(self, page_id: str) -> RequestSequencer:
        """Get (or create) the sequencer of a page session."""
        sequencer = self._sequencers.get(page_id)
        if sequencer is None:
            sequencer = RequestSequencer()
            self._sequencers[page_id] = sequencer
            while len(self._sequencers) > self._max_pages:
                self._sequencers.popitem(last=False)
        else:
            self._sequencers.move_to_end(page_id)
        return sequencer

    def __len__(self) -> int:
        return len(self._sequencers)
