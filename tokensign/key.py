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

"""Key material handed to signers.

A :class:`Key` holds the raw PEM or DER encoded key together with an
optional passphrase. Keys are immutable and can be shared between threads;
signers parse the contents again on every call and never keep the parsed
key around::

    from tokensign import key
    from tokensign.crypt import rsa_pss

    private = key.Key.from_file("/path/to/private.pem", passphrase="secret")
    signature = rsa_pss.PS256.sign(b"header.payload", private)
"""

import base64
import binascii
import logging

from tokensign import _helpers
from tokensign import exceptions

_LOGGER = logging.getLogger(__name__)


class Key(object):
    """Raw key material with an optional passphrase.

    Args:
        contents (Union[str, bytes]): The PEM or DER encoded key.
        passphrase (Optional[str]): The passphrase protecting an encrypted
            private key.

    Raises:
        tokensign.exceptions.InvalidKeyProvided: If the contents are empty.
    """

    __slots__ = ("_contents", "_passphrase")

    def __init__(self, contents, passphrase=None):
        contents = _helpers.to_bytes(contents)
        if not contents:
            raise exceptions.InvalidKeyProvided.cannot_be_empty()

        object.__setattr__(self, "_contents", contents)
        object.__setattr__(self, "_passphrase", passphrase or None)

    def __setattr__(self, name, value):
        raise AttributeError("Key objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Key objects are immutable")

    def __repr__(self):
        return "{}(<{} bytes>, passphrase={})".format(
            type(self).__name__,
            len(self._contents),
            "<set>" if self._passphrase is not None else None,
        )

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return (
            self._contents == other._contents
            and self._passphrase == other._passphrase
        )

    def __hash__(self):
        return hash((self._contents, self._passphrase))

    @property
    def contents(self):
        """bytes: The encoded key material."""
        return self._contents

    @property
    def passphrase(self):
        """Optional[str]: The passphrase, or ``None`` when not set."""
        return self._passphrase

    @classmethod
    def from_string(cls, contents, passphrase=None):
        """Creates a key from a PEM string.

        Args:
            contents (Union[str, bytes]): The key in PEM (or DER) format.
            passphrase (Optional[str]): The passphrase of an encrypted key.

        Returns:
            Key: The constructed key.
        """
        return cls(contents, passphrase=passphrase)

    @classmethod
    def from_base64(cls, encoded, passphrase=None):
        """Creates a key from base64 encoded contents.

        Args:
            encoded (Union[str, bytes]): The base64 encoded key material.
            passphrase (Optional[str]): The passphrase of an encrypted key.

        Returns:
            Key: The constructed key.

        Raises:
            tokensign.exceptions.InvalidKeyProvided: If ``encoded`` is not
                valid base64 or decodes to nothing.
        """
        try:
            contents = base64.b64decode(_helpers.to_bytes(encoded), validate=True)
        except (binascii.Error, ValueError) as caught_exc:
            new_exc = exceptions.InvalidKeyProvided.cannot_be_decoded(str(caught_exc))
            raise new_exc from caught_exc

        return cls(contents, passphrase=passphrase)

    @classmethod
    def from_file(cls, path, passphrase=None):
        """Creates a key from a file on disk.

        Args:
            path (str): The path to the PEM or DER file.
            passphrase (Optional[str]): The passphrase of an encrypted key.

        Returns:
            Key: The constructed key.

        Raises:
            tokensign.exceptions.KeyFileCouldNotBeRead: If the file can't be
                read.
        """
        try:
            with open(path, "rb") as fh:
                contents = fh.read()
        except OSError as caught_exc:
            new_exc = exceptions.KeyFileCouldNotBeRead(path, caught_exc.strerror)
            raise new_exc from caught_exc

        _LOGGER.debug("Loaded key material from %s", path)
        return cls(contents, passphrase=passphrase)
