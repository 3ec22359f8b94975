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

"""RSASSA-PSS token signers.

The ``PS256``, ``PS384`` and ``PS512`` signers share the same sign and
verify logic and only differ in the hash used for both the message digest
and the MGF1 mask generation function. The salt length equals the digest
length.

Signing enforces a minimum key length of :data:`MINIMUM_KEY_LENGTH` bits.
Verification does not, so that tokens issued with older, shorter keys can
still be checked::

    from tokensign import key
    from tokensign.crypt import rsa_pss

    signature = rsa_pss.PS256.sign(signing_input, key.Key.from_file("private.pem"))
    assert rsa_pss.PS256.verify(
        signature, signing_input, key.Key.from_file("public.pem"))
"""

import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from tokensign import _helpers
from tokensign import exceptions
from tokensign.crypt import _cryptography_rsa
from tokensign.crypt import base

_LOGGER = logging.getLogger(__name__)

MINIMUM_KEY_LENGTH = 2048
_KEY_FAMILY = "RSA"


class RsaPssSigner(base.Signer):
    """Signs and verifies payloads with RSASSA-PSS.

    Instances hold no key material; the key is passed to every call.

    Args:
        algorithm_id (str): The token ``alg`` value, for example ``"PS256"``.
        hash_name (str): The digest and MGF1 hash, for example ``"sha256"``.

    Raises:
        tokensign.exceptions.UnsupportedAlgorithm: If the hash is unknown.
    """

    def __init__(self, algorithm_id, hash_name):
        _cryptography_rsa.hash_for(hash_name)
        self._algorithm_id = algorithm_id
        self._hash_name = hash_name

    def __repr__(self):
        return "{}({!r}, {!r})".format(
            type(self).__name__, self._algorithm_id, self._hash_name
        )

    @property  # type: ignore
    @_helpers.copy_docstring(base.Signer)
    def algorithm_id(self):
        return self._algorithm_id

    @_helpers.copy_docstring(base.Signer)
    def algorithm(self):
        return self._hash_name

    @_helpers.copy_docstring(base.Signer)
    def sign(self, payload, key):
        payload = _helpers.to_bytes(payload)
        try:
            private_key = _cryptography_rsa.load_private_key(
                key.contents, key.passphrase
            )
        except ValueError as caught_exc:
            _LOGGER.debug("Rejected signing key for %s: unparsable", self._algorithm_id)
            new_exc = exceptions.InvalidKeyProvided.cannot_be_parsed(str(caught_exc))
            raise new_exc from caught_exc

        if not isinstance(private_key, rsa.RSAPrivateKey):
            actual = _cryptography_rsa.key_type_name(private_key)
            _LOGGER.debug(
                "Rejected signing key for %s: %s", self._algorithm_id, actual
            )
            raise exceptions.InvalidKeyProvided.incompatible_key_type(
                _KEY_FAMILY, actual
            )

        if private_key.key_size < MINIMUM_KEY_LENGTH:
            _LOGGER.debug(
                "Rejected signing key for %s: %d bits",
                self._algorithm_id,
                private_key.key_size,
            )
            raise exceptions.InvalidKeyProvided.too_short(
                MINIMUM_KEY_LENGTH, private_key.key_size
            )

        if _helpers.is_logging_enabled(_LOGGER):
            _LOGGER.debug(
                "Signing %d bytes with %s and a %d bit key",
                len(payload),
                self._algorithm_id,
                private_key.key_size,
            )

        signature = _cryptography_rsa.sign(private_key, payload, self._hash_name)

        if not isinstance(signature, bytes) or not signature:
            _LOGGER.error(
                "Crypto provider returned an empty %s signature", self._algorithm_id
            )
            raise exceptions.SignerContractError(
                "The crypto provider returned an empty signature for {}".format(
                    self._algorithm_id
                )
            )

        return signature

    @_helpers.copy_docstring(base.Signer)
    def verify(self, expected, payload, key):
        expected = _helpers.to_bytes(expected)
        payload = _helpers.to_bytes(payload)
        try:
            public_key = _cryptography_rsa.load_public_key(key.contents)
        except ValueError as caught_exc:
            _LOGGER.debug(
                "Rejected verification key for %s: unparsable", self._algorithm_id
            )
            new_exc = exceptions.InvalidKeyProvided.cannot_be_parsed(str(caught_exc))
            raise new_exc from caught_exc

        if not isinstance(public_key, rsa.RSAPublicKey):
            actual = _cryptography_rsa.key_type_name(public_key)
            _LOGGER.debug(
                "Rejected verification key for %s: %s", self._algorithm_id, actual
            )
            raise exceptions.InvalidKeyProvided.incompatible_key_type(
                _KEY_FAMILY, actual
            )

        if _helpers.is_logging_enabled(_LOGGER):
            _LOGGER.debug(
                "Verifying %d bytes with %s and a %d bit key",
                len(payload),
                self._algorithm_id,
                public_key.key_size,
            )

        return _cryptography_rsa.verify(
            public_key, expected, payload, self._hash_name
        )


PS256 = RsaPssSigner("PS256", "sha256")
PS384 = RsaPssSigner("PS384", "sha384")
PS512 = RsaPssSigner("PS512", "sha512")

ALGORITHMS = {signer.algorithm_id: signer for signer in (PS256, PS384, PS512)}


def for_algorithm_id(algorithm_id):
    """Looks up the signer for a token ``alg`` value.

    Args:
        algorithm_id (str): One of ``PS256``, ``PS384`` or ``PS512``.

    Returns:
        RsaPssSigner: The matching signer.

    Raises:
        tokensign.exceptions.UnsupportedAlgorithm: If the id is unknown.
    """
    try:
        return ALGORITHMS[algorithm_id]
    except KeyError as caught_exc:
        raise exceptions.UnsupportedAlgorithm(
            "Unsupported algorithm id: {}".format(algorithm_id)
        ) from caught_exc
