# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exceptions used in the tokensign package."""

from typing import Any, Optional


class TokenSignError(Exception):
    """Base class for all tokensign errors."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args)
        self._retryable: bool = kwargs.get("retryable", False)

    @property
    def retryable(self) -> bool:
        return self._retryable


class InvalidKeyProvided(TokenSignError, ValueError):
    """Used to indicate that a key was rejected before signing or verifying.

    The ``kind`` attribute tells the reasons apart:

    * ``cannot-parse``: the key material could not be loaded.
    * ``incompatible-type``: the key is not of the expected family or role.
    * ``too-short``: the key is weaker than the accepted minimum.
    * ``empty``: the key has no contents.
    * ``cannot-decode``: base64 key contents could not be decoded.
    """

    CANNOT_PARSE = "cannot-parse"
    INCOMPATIBLE_TYPE = "incompatible-type"
    TOO_SHORT = "too-short"
    EMPTY = "empty"
    CANNOT_DECODE = "cannot-decode"

    def __init__(
        self, message: str, kind: str = CANNOT_PARSE, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.kind: str = kind
        self.expected: Optional[str] = None
        self.actual: Optional[Any] = None
        self.minimum: Optional[int] = None

    @property
    def retryable(self) -> bool:
        return False

    @classmethod
    def cannot_be_parsed(cls, reason: str) -> "InvalidKeyProvided":
        return cls(
            "It was not possible to parse your key, reason: {}".format(reason),
            kind=cls.CANNOT_PARSE,
        )

    @classmethod
    def incompatible_key_type(
        cls, expected: str, actual: str
    ) -> "InvalidKeyProvided":
        error = cls(
            "The type of the provided key is not \"{}\", \"{}\" provided".format(
                expected, actual
            ),
            kind=cls.INCOMPATIBLE_TYPE,
        )
        error.expected = expected
        error.actual = actual
        return error

    @classmethod
    def too_short(cls, minimum: int, actual: int) -> "InvalidKeyProvided":
        error = cls(
            "Key provided is shorter than {} bits, only {} bits provided".format(
                minimum, actual
            ),
            kind=cls.TOO_SHORT,
        )
        error.minimum = minimum
        error.actual = actual
        return error

    @classmethod
    def cannot_be_empty(cls) -> "InvalidKeyProvided":
        return cls("Key cannot be empty", kind=cls.EMPTY)

    @classmethod
    def cannot_be_decoded(cls, reason: str) -> "InvalidKeyProvided":
        return cls(
            "Key contents are not valid base64, reason: {}".format(reason),
            kind=cls.CANNOT_DECODE,
        )


class KeyFileCouldNotBeRead(TokenSignError, OSError):
    """Used to indicate that a key file could not be opened or read."""

    def __init__(self, path: str, reason: Optional[str] = None, **kwargs: Any) -> None:
        message = "The path \"{}\" does not contain a valid key file".format(path)
        if reason:
            message = "{}: {}".format(message, reason)
        super().__init__(message, **kwargs)
        self.path: str = path


class UnsupportedAlgorithm(TokenSignError, ValueError):
    """Used to indicate an unknown algorithm id or hash name."""


class SignerContractError(TokenSignError, RuntimeError):
    """Used to indicate that the crypto provider broke its contract.

    This is a defect in the underlying library or its integration, not a
    problem with the caller's key, and is never retryable.
    """

    @property
    def retryable(self) -> bool:
        return False
