"""
Transcript Helpers.

Turn raw speech-to-text output into note fields.
"""

TITLE_WORDS = 3


def title_from_transcript(transcript: str, max_words: int = TITLE_WORDS) -> str:
    """
    Build a note title from the first words of a transcript.

        >>> title_from_transcript("remind me to book a flight")
        'remind me to...'
        >>> title_from_transcript("buy milk")
        'buy milk'
    """
    words = transcript.split()
    title = " ".join(words[:max_words])
    if len(words) > max_words:
        title += "..."
    return title
