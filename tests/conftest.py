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

import collections
import datetime

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID
import pytest

PASSPHRASE = "correct horse battery staple"

KeyMaterial = collections.namedtuple(
    "KeyMaterial",
    [
        "private_key",
        "private_pem",
        "pkcs1_pem",
        "private_der",
        "encrypted_pem",
        "public_pem",
        "public_der",
        "cert_pem",
    ],
)


def _make_cert(private_key):
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "tokensign-test")])
    now = datetime.datetime.now(datetime.timezone.utc)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(private_key, hashes.SHA256())
    )


def _make_key_material(private_key):
    public_key = private_key.public_key()
    return KeyMaterial(
        private_key=private_key,
        private_pem=private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        ),
        pkcs1_pem=private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption(),
        ),
        private_der=private_key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        ),
        encrypted_pem=private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.BestAvailableEncryption(PASSPHRASE.encode("utf-8")),
        ),
        public_pem=public_key.public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        ),
        public_der=public_key.public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        ),
        cert_pem=_make_cert(private_key).public_bytes(serialization.Encoding.PEM),
    )


@pytest.fixture(scope="session")
def rsa_2048():
    return _make_key_material(
        rsa.generate_private_key(public_exponent=65537, key_size=2048)
    )


@pytest.fixture(scope="session")
def rsa_1024():
    return _make_key_material(
        rsa.generate_private_key(public_exponent=65537, key_size=1024)
    )


@pytest.fixture(scope="session")
def ec_p256():
    return _make_key_material(ec.generate_private_key(ec.SECP256R1()))


@pytest.fixture
def passphrase():
    return PASSPHRASE
