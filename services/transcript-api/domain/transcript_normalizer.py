"""Core business logic for turning service transcripts into timed words."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from transcriber_common import setup_logging

from exceptions import InvalidPayloadError

from .models import FlatWordsPayload, RawWord, UtterancesPayload, Word

logger = setup_logging()

MS_PER_SECOND = 1000


class TranscriptNormalizer:
    """Builds an ordered word list from a completed transcript payload."""

    def normalize(self, payload: Mapping[str, Any]) -> list[Word]:
        """
        Normalizes a completed transcript into words timed in seconds.

        The payload is decoded as a flat word list first and as a list of
        utterances second. A present flat list is used as is, even when
        empty; the utterance form must yield at least one word.

        Args:
            payload: The service response for a completed transcript.

        Returns:
            Words in transcript order.

        Raises:
            InvalidPayloadError: If neither form yields usable words.
        """
        decoded = self._decode(payload)

        try:
            if isinstance(decoded, FlatWordsPayload):
                words = [self._to_word(w) for w in decoded.words]
                logger.info("Transcript words normalized", extra={"word_count": len(words)})
                return words

            words = [
                self._to_word(w)
                for utterance in decoded.utterances
                for w in (utterance.words or [])
            ]
        except ValidationError as e:
            logger.exception("Transcript word has invalid offsets")
            raise InvalidPayloadError("word offsets out of order", e) from e

        if not words:
            raise InvalidPayloadError("utterances contain no words")

        logger.info(
            "Transcript words normalized from utterances",
            extra={"word_count": len(words), "utterance_count": len(decoded.utterances)},
        )
        return words

    def _decode(self, payload: Mapping[str, Any]) -> FlatWordsPayload | UtterancesPayload:
        """Decodes the payload as the flat variant, else the utterance variant."""
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError("payload is not an object")

        try:
            return FlatWordsPayload.model_validate(payload)
        except ValidationError:
            logger.warning("Transcript has no usable words list, trying utterances")

        try:
            return UtterancesPayload.model_validate(payload)
        except ValidationError as e:
            if payload.get("utterances") is None:
                raise InvalidPayloadError("missing words and utterances", e) from e
            raise InvalidPayloadError("utterances could not be decoded", e) from e

    def _to_word(self, raw: RawWord) -> Word:
        return Word(
            word=raw.text or raw.word or "",
            start=(raw.start or 0) / MS_PER_SECOND,
            end=(raw.end or 0) / MS_PER_SECOND,
        )
