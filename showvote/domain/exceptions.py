"""Root of the Show Vote error hierarchy."""


class ShowVoteError(Exception):
    """A rule of the voting day was broken.

    str(error) is the sentence shown to the viewer; the API layer picks
    the HTTP status from the concrete subclass.
    """
