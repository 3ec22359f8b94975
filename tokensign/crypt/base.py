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

"""Base classes for token signers."""

import abc


class Signer(object, metaclass=abc.ABCMeta):
    """Abstract base class for token signing algorithms.

    A signer is bound to one algorithm and receives the key on every call,
    so a single instance can serve any number of keys concurrently.
    """

    @property
    @abc.abstractmethod
    def algorithm_id(self):
        """str: The algorithm id used in the token ``alg`` header."""
        raise NotImplementedError("Algorithm id must be implemented")

    @abc.abstractmethod
    def algorithm(self):
        """Returns the hash identifier used to create or verify signatures.

        Returns:
            str: The hash name, for example ``"sha256"``.
        """
        raise NotImplementedError("Algorithm must be implemented")

    @abc.abstractmethod
    def sign(self, payload, key):
        """Signs a payload.

        Args:
            payload (Union[str, bytes]): The payload to be signed.
            key (tokensign.key.Key): The private key to sign with.

        Returns:
            bytes: The signature of the payload.

        Raises:
            tokensign.exceptions.InvalidKeyProvided: If the key is rejected.
        """
        raise NotImplementedError("Sign must be implemented")

    @abc.abstractmethod
    def verify(self, expected, payload, key):
        """Verifies a payload against a signature.

        Args:
            expected (Union[str, bytes]): The signature to check.
            payload (Union[str, bytes]): The payload that was signed.
            key (tokensign.key.Key): The public key to verify with.

        Returns:
            bool: True if the signature matches the payload, False otherwise.

        Raises:
            tokensign.exceptions.InvalidKeyProvided: If the key is rejected.
        """
        raise NotImplementedError("Verify must be implemented")
