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

"""RSA key loading and PSS primitives backed by ``cryptography``.

This module only adapts the `cryptography`_ library: it parses key
material and runs the PSS sign and verify operations. It does not decide
which keys are acceptable; that policy lives in
:mod:`tokensign.crypt.rsa_pss`.

.. _cryptography: https://cryptography.io/en/latest/
"""

from cryptography import x509
import cryptography.exceptions
from cryptography.hazmat import backends
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.asymmetric import ed448
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric import rsa

from tokensign import _helpers
from tokensign import exceptions

_BACKEND = backends.default_backend()
_PEM_MARKER = b"-----BEGIN"
_HASHES = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}
_KEY_INTERFACES = (
    rsa.RSAPrivateKey,
    rsa.RSAPublicKey,
    ec.EllipticCurvePrivateKey,
    ec.EllipticCurvePublicKey,
    dsa.DSAPrivateKey,
    dsa.DSAPublicKey,
    ed25519.Ed25519PrivateKey,
    ed25519.Ed25519PublicKey,
    ed448.Ed448PrivateKey,
    ed448.Ed448PublicKey,
)
_LOAD_ERRORS = (ValueError, TypeError, cryptography.exceptions.UnsupportedAlgorithm)


def _run_loaders(loaders, contents):
    """Runs each loader in turn and returns the first key it produces.

    Returns:
        Tuple[Any, List[Exception]]: The loaded key (or ``None``) and the
            errors raised by the loaders that failed.
    """
    errors = []
    for loader in loaders:
        try:
            return loader(contents), errors
        except _LOAD_ERRORS as caught_exc:
            errors.append(caught_exc)
    return None, errors


def _parse_error(contents, errors):
    # errors[0] comes from the PEM loader, errors[1] from the DER one.
    error = errors[0] if contents.lstrip().startswith(_PEM_MARKER) else errors[1]
    return ValueError(str(error) or type(error).__name__)


def _private_loaders(password):
    loaders = [
        lambda data: serialization.load_pem_private_key(
            data, password=password, backend=_BACKEND
        ),
        lambda data: serialization.load_der_private_key(
            data, password=password, backend=_BACKEND
        ),
    ]
    if password is not None:
        # A passphrase given for an unencrypted key is ignored.
        loaders.extend(_private_loaders(None))
    return loaders


def _public_loaders():
    return (
        lambda data: serialization.load_pem_public_key(data, backend=_BACKEND),
        lambda data: serialization.load_der_public_key(data, backend=_BACKEND),
        lambda data: x509.load_pem_x509_certificate(data, _BACKEND).public_key(),
        lambda data: x509.load_der_x509_certificate(data, _BACKEND).public_key(),
    )


def key_type_name(key):
    """Returns a stable, human readable name for a parsed key's type.

    Args:
        key (Any): A key object produced by this module.

    Returns:
        str: The name of the ``cryptography`` interface the key implements,
            or its class name when none matches.
    """
    for interface in _KEY_INTERFACES:
        if isinstance(key, interface):
            return interface.__name__
    return type(key).__name__


def load_private_key(contents, passphrase=None):
    """Parses private key material.

    PEM is tried before DER. When the material is not a private key but
    does hold a public key or certificate, that public key is returned so
    callers can report a key of the wrong role rather than a parse error.

    Args:
        contents (bytes): The PEM or DER encoded key.
        passphrase (Optional[str]): The passphrase of an encrypted key.

    Returns:
        Any: The parsed ``cryptography`` key object.

    Raises:
        ValueError: If the material can't be parsed, including a wrong or
            missing passphrase.
    """
    password = _helpers.to_bytes(passphrase) if passphrase is not None else None
    key, errors = _run_loaders(_private_loaders(password), contents)
    if key is not None:
        return key

    public_key, _ = _run_loaders(_public_loaders(), contents)
    if public_key is not None:
        return public_key

    raise _parse_error(contents, errors)


def load_public_key(contents):
    """Parses public key material.

    Accepts a public key, an X.509 certificate or an unencrypted private
    key, in which case its public half is returned. No passphrase is used.

    Args:
        contents (bytes): The PEM or DER encoded key or certificate.

    Returns:
        Any: The parsed ``cryptography`` public key object.

    Raises:
        ValueError: If the material can't be parsed.
    """
    key, errors = _run_loaders(_public_loaders(), contents)
    if key is not None:
        return key

    private_key, _ = _run_loaders(_private_loaders(None), contents)
    if private_key is not None:
        return private_key.public_key()

    raise _parse_error(contents, errors)


def hash_for(hash_name):
    """Returns a ``cryptography`` hash instance for a hash name.

    Args:
        hash_name (str): One of ``sha256``, ``sha384`` or ``sha512``.

    Returns:
        cryptography.hazmat.primitives.hashes.HashAlgorithm: The hash.

    Raises:
        tokensign.exceptions.UnsupportedAlgorithm: If the hash is unknown.
    """
    try:
        return _HASHES[hash_name]()
    except KeyError as caught_exc:
        raise exceptions.UnsupportedAlgorithm(
            "Unsupported hash algorithm: {}".format(hash_name)
        ) from caught_exc


def pss_padding(hash_algorithm):
    """Builds PSS padding whose MGF1 hash matches the message digest."""
    return padding.PSS(
        mgf=padding.MGF1(hash_algorithm), salt_length=padding.PSS.DIGEST_LENGTH
    )


def sign(private_key, payload, hash_name):
    """Signs a payload with RSASSA-PSS.

    Args:
        private_key (cryptography.hazmat.primitives.asymmetric.rsa.RSAPrivateKey):
            The key to sign with.
        payload (bytes): The data to sign.
        hash_name (str): The digest and MGF1 hash.

    Returns:
        bytes: The signature.
    """
    hash_algorithm = hash_for(hash_name)
    return private_key.sign(payload, pss_padding(hash_algorithm), hash_algorithm)


def verify(public_key, signature, payload, hash_name):
    """Verifies an RSASSA-PSS signature.

    Args:
        public_key (cryptography.hazmat.primitives.asymmetric.rsa.RSAPublicKey):
            The key to verify with.
        signature (bytes): The signature to check.
        payload (bytes): The data that was signed.
        hash_name (str): The digest and MGF1 hash.

    Returns:
        bool: True if the signature is valid, False otherwise.
    """
    hash_algorithm = hash_for(hash_name)
    try:
        public_key.verify(
            signature, payload, pss_padding(hash_algorithm), hash_algorithm
        )
        return True
    except cryptography.exceptions.InvalidSignature:
        return False
