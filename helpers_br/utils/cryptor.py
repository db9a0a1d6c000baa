from __future__ import annotations
import base64
import binascii
import hashlib
import hmac
import os
from typing import NamedTuple

from cryptography.exceptions import InvalidSignature, InvalidTag
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding as asym_padding, rsa
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .config import setting

def _require(value: str, name: str) -> None:
    if not isinstance(value, str) or value == "":
        raise ValueError(f"'{name}' deve ser uma string não vazia")

# ------------------------------------------------------------
# SHA-256
# ------------------------------------------------------------
def hash_text(text: str) -> str:
    """SHA-256 do texto (UTF-8) em hexadecimal."""
    _require(text, "text")
    return hashlib.sha256(text.encode("utf-8")).hexdigest()

def compare_hash(text: str, hashed: str) -> bool:
    _require(text, "text")
    _require(hashed, "hashed")
    return hmac.compare_digest(hash_text(text), hashed.lower())

def generate_salt(length: int = 16) -> str:
    """Salt aleatório de `length` bytes, em hexadecimal (2*length caracteres)."""
    if length <= 0:
        raise ValueError("length deve ser maior que 0")
    return binascii.hexlify(os.urandom(length)).decode()

# ------------------------------------------------------------
# Senha PBKDF2
# ------------------------------------------------------------
def _pbkdf2(password: str, salt: bytes, iters: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iters, dklen=32)

def hash_password(password: str, iters: int | None = None) -> str:
    """Formato: pbkdf2$<iter>$<salt hex>$<hash hex>"""
    _require(password, "password")
    iters = iters or int(setting("HELPERS_PBKDF2_ITER"))
    salt = os.urandom(16)
    dk = _pbkdf2(password, salt, iters)
    return f"pbkdf2${iters}${binascii.hexlify(salt).decode()}${binascii.hexlify(dk).decode()}"

def verify_password(password: str, stored: str) -> bool:
    try:
        algo, iters_s, salt_hex, hash_hex = stored.split("$")
        if algo != "pbkdf2":
            return False
        salt = binascii.unhexlify(salt_hex)
        expected = binascii.unhexlify(hash_hex)
        dk = _pbkdf2(password, salt, int(iters_s))
        return hmac.compare_digest(dk, expected)
    except (AttributeError, ValueError, binascii.Error):
        return False

def is_pbkdf2_hash(s: str) -> bool:
    return isinstance(s, str) and s.startswith("pbkdf2$")

# ------------------------------------------------------------
# AES-GCM (nonce de 12 bytes + texto cifrado, em Base64)
# ------------------------------------------------------------
def generate_key(bits: int = 256) -> bytes:
    """Nova chave AES-GCM de 128, 192 ou 256 bits."""
    return AESGCM.generate_key(bit_length=bits)

def encrypt(text: str, key: bytes) -> str:
    """
    Cifra `text` com AES-GCM. Nonce aleatório a cada chamada, então o mesmo
    texto gera payloads diferentes.
    """
    _require(text, "text")
    nonce = os.urandom(12)
    ciphertext = AESGCM(key).encrypt(nonce, text.encode("utf-8"), None)
    return base64.b64encode(nonce + ciphertext).decode("ascii")

def decrypt(payload: str, key: bytes) -> str:
    """Inverso de encrypt(). Payload adulterado ou chave errada -> ValueError."""
    _require(payload, "payload")
    try:
        raw = base64.b64decode(payload, validate=True)
    except ValueError as e:
        raise ValueError("payload não está em Base64") from e
    if len(raw) <= 12:
        raise ValueError("payload curto demais")
    nonce, ciphertext = raw[:12], raw[12:]
    try:
        plaintext = AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as e:
        raise ValueError("Falha ao decifrar: chave incorreta ou dados adulterados") from e
    return plaintext.decode("utf-8")

# ------------------------------------------------------------
# Assinatura RSA (SHA-256, PKCS#1 v1.5)
# ------------------------------------------------------------
class KeyPair(NamedTuple):
    public_key: str
    private_key: str

def generate_key_pair(key_size: int = 2048) -> KeyPair:
    """Par RSA em PEM: pública SubjectPublicKeyInfo, privada PKCS8 sem senha."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    pub_pem = private_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    priv_pem = private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    return KeyPair(pub_pem.decode("ascii"), priv_pem.decode("ascii"))

def sign(data: str, private_key: str) -> str:
    """Assinatura de `data` em hexadecimal."""
    _require(data, "data")
    _require(private_key, "private_key")
    key = serialization.load_pem_private_key(private_key.encode("ascii"), password=None)
    signature = key.sign(data.encode("utf-8"), asym_padding.PKCS1v15(), hashes.SHA256())
    return signature.hex()

def verify(data: str, signature: str, public_key: str) -> bool:
    _require(data, "data")
    _require(signature, "signature")
    _require(public_key, "public_key")
    key = serialization.load_pem_public_key(public_key.encode("ascii"))
    try:
        key.verify(bytes.fromhex(signature), data.encode("utf-8"), asym_padding.PKCS1v15(), hashes.SHA256())
    except (InvalidSignature, ValueError):
        return False
    return True
