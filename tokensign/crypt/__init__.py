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

"""Cryptography helpers for signing and verifying tokens.

This module provides signers for the RSASSA-PSS family of algorithms. Each
signer is bound to one algorithm and receives a :class:`tokensign.key.Key`
on every call::

    from tokensign import key
    from tokensign import crypt

    signer = crypt.for_algorithm_id("PS384")
    signature = signer.sign(b"header.payload", key.Key.from_file("private.pem"))

Signing rejects RSA keys shorter than 2048 bits; verification accepts them.
"""

from tokensign.crypt import base
from tokensign.crypt import rsa_pss

Signer = base.Signer
RsaPssSigner = rsa_pss.RsaPssSigner
PS256 = rsa_pss.PS256
PS384 = rsa_pss.PS384
PS512 = rsa_pss.PS512
for_algorithm_id = rsa_pss.for_algorithm_id

__all__ = [
    "PS256",
    "PS384",
    "PS512",
    "RsaPssSigner",
    "Signer",
    "for_algorithm_id",
]
