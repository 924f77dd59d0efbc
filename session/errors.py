"""Errors raised by the session layer."""


class SessionNotInitialized(LookupError):
    """
    Raised when session state is accessed without an initialized session.

    This is the only condition the assessment core reports as an error;
    out-of-range steps and malformed answers degrade to defined defaults.
    """

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"No active assessment session with id '{session_id}'")


class SectionIncomplete(Exception):
    """
    Raised by a presentation layer that refuses to leave a step because
    some of its questions are still unanswered.
    """

    def __init__(self, step: str, missing: list):
        self.step = step
        self.missing = list(missing)
        super().__init__(f"Answer all questions in '{step}' before continuing")
