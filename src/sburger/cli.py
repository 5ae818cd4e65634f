"""Command-line interface for the sBurger-256 cipher."""

from __future__ import annotations

import logging
import random
import secrets
import sys
from typing import TextIO

import click

from . import __version__
from .cipher import SBurger256
from .config import DemoConfig
from .errors import SBurgerError
from .messages import decrypt_message, derive_key, encrypt_message, new_cipher
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_hex, format_block, hex_to_bytes
from .vectors import KNOWN_ANSWER_VECTORS, validate_vector


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _resolve_key(key_hex: str | None, passphrase: str | None) -> bytes:
    """Key from --key or --passphrase; exactly one must be given."""
    if (key_hex is None) == (passphrase is None):
        _fail("Give exactly one of --key or --passphrase")

    if passphrase is not None:
        return derive_key(passphrase)

    try:
        key = hex_to_bytes(key_hex)
    except ValueError as e:
        _fail(f"Invalid key hex: {e}")
    if len(key) != SBurger256.KEY_LENGTH:
        _fail(
            f"Key must be {SBurger256.KEY_LENGTH * 2} hex chars "
            f"({SBurger256.KEY_LENGTH} bytes), got {len(key_hex)} chars"
        )
    return key


def _ready_cipher(key: bytes) -> SBurger256:
    try:
        return new_cipher(key)
    except SBurgerError as e:
        _fail(str(e))


key_option = click.option(
    "--key",
    "key_hex",
    type=str,
    default=None,
    help="256-bit key as 64 hex chars",
)
passphrase_option = click.option(
    "--passphrase",
    type=str,
    default=None,
    help="Passphrase hashed with SHA-256 into the key",
)


@click.group()
@click.version_option(version=__version__, prog_name="sburger")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level (default: WARNING)",
)
def main(log_level: str) -> None:
    """sBurger-256 block cipher tools.

    Encrypt and decrypt with a 256-bit key, inspect the key-derived
    settings, and validate the implementation against known answers.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--passphrase", type=str, default=None, help="Demo passphrase")
@click.option("--message", type=str, default=None, help="Demo message")
def demo(passphrase: str | None, message: str | None) -> None:
    """Encrypt a message, decrypt it, then try the wrong key."""
    defaults = DemoConfig()
    try:
        config = DemoConfig(
            passphrase=passphrase if passphrase is not None else defaults.passphrase,
            message=message if message is not None else defaults.message,
        )
    except ValueError as e:
        _fail(str(e))

    key = derive_key(config.passphrase, config.encoding)
    cipher = new_cipher(key)

    click.echo("sBurger-256 Demo")
    click.echo("")
    click.echo(f"Passphrase : {config.passphrase}")
    click.echo(f"Derived key: {bytes_to_hex(key)}")
    click.echo(f"Plaintext  : {config.message}")
    click.echo("")

    ciphertext = encrypt_message(cipher, config.message_bytes, config.block_size)
    click.echo(f"Ciphertext (hex): {bytes_to_hex(ciphertext)}")
    click.echo("")

    recovered = decrypt_message(cipher, ciphertext, config.block_size).decode(config.encoding)
    click.echo(f"Decrypted  : {recovered}")
    click.echo(f"Match      : {recovered == config.message}")
    click.echo("")

    wrong_key = derive_key(config.wrong_passphrase, config.encoding)
    wrong_cipher = new_cipher(wrong_key)
    garbled = bytearray()
    for offset in range(0, len(ciphertext), config.block_size):
        garbled += wrong_cipher.decrypt(bytearray(ciphertext[offset:offset + config.block_size]))
    garbled_text = bytes(garbled[:len(config.message_bytes)]).decode(config.encoding, errors="replace")

    click.echo(f"Wrong key  : {bytes_to_hex(wrong_key)}")
    click.echo(f"Garbled    : {garbled_text}")
    click.echo(f"Match      : {garbled_text == config.message}")


@main.command()
@key_option
@passphrase_option
def settings(key_hex: str | None, passphrase: str | None) -> None:
    """Show the settings derived from a key."""
    cipher = _ready_cipher(_resolve_key(key_hex, passphrase))
    network = cipher.network

    click.echo(f"Key: {bytes_to_hex(cipher.key)}")
    click.echo(f"b = {list(cipher.settings.b)}")
    click.echo(f"f = {list(cipher.settings.f)}")
    click.echo(f"Reverse on entry: {network.reverse_on_entry}")
    click.echo(f"Byte steps: {' -> '.join(network.step_names)}")
    click.echo(f"Reverse on exit:  {network.reverse_on_exit}")


@main.command()
@key_option
@passphrase_option
@click.option("--text", type=str, default=None, help="Plaintext as UTF-8 text")
@click.option("--hex", "pt_hex", type=str, default=None, help="Plaintext as hex")
def encrypt(
    key_hex: str | None,
    passphrase: str | None,
    text: str | None,
    pt_hex: str | None,
) -> None:
    """Pad and encrypt a message; prints ciphertext hex."""
    if (text is None) == (pt_hex is None):
        _fail("Give exactly one of --text or --hex")

    cipher = _ready_cipher(_resolve_key(key_hex, passphrase))

    if text is not None:
        plaintext = text.encode("utf-8")
    else:
        try:
            plaintext = hex_to_bytes(pt_hex)
        except ValueError as e:
            _fail(f"Invalid plaintext hex: {e}")

    click.echo(bytes_to_hex(encrypt_message(cipher, plaintext)))


@main.command()
@key_option
@passphrase_option
@click.argument("ciphertext_hex")
@click.option("--hex-out", is_flag=True, help="Print plaintext as hex instead of text")
def decrypt(
    key_hex: str | None,
    passphrase: str | None,
    ciphertext_hex: str,
    hex_out: bool,
) -> None:
    """Decrypt a message produced by 'encrypt'."""
    cipher = _ready_cipher(_resolve_key(key_hex, passphrase))

    try:
        ciphertext = hex_to_bytes(ciphertext_hex)
    except ValueError as e:
        _fail(f"Invalid ciphertext hex: {e}")

    try:
        plaintext = decrypt_message(cipher, ciphertext)
    except ValueError as e:
        _fail(str(e))

    if hex_out:
        click.echo(bytes_to_hex(plaintext))
    else:
        click.echo(plaintext.decode("utf-8", errors="replace"))


@main.command()
@key_option
@passphrase_option
@click.option("--data", "data_hex", type=str, required=True, help="Block as hex (1..32 bytes)")
@click.option("--decrypt", "do_decrypt", is_flag=True, help="Decrypt instead of encrypt")
@click.option("--verbose", "-v", is_flag=True, help="Print every byte step")
@click.option(
    "--trace",
    "trace_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write a JSON Lines trace to FILE",
)
def block(
    key_hex: str | None,
    passphrase: str | None,
    data_hex: str,
    do_decrypt: bool,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Transform a single raw block without padding."""
    cipher = _ready_cipher(_resolve_key(key_hex, passphrase))

    try:
        data = bytearray(hex_to_bytes(data_hex))
    except ValueError as e:
        _fail(f"Invalid block hex: {e}")
    original = bytes(data)

    trace_file: TextIO | None = None
    if trace_path:
        try:
            trace_file = open(trace_path, "w")
        except OSError as e:
            _fail(f"Cannot open trace file: {e}")

    tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)
    mode = "Decryption" if do_decrypt else "Encryption"

    try:
        if verbose:
            print_header(f"sBurger-256 {mode}")
            click.echo(f"Key:   {bytes_to_hex(cipher.key)}")
            click.echo(f"Input: {format_block(original)}")

        try:
            if do_decrypt:
                cipher.decrypt(data, tracer=tracer)
            else:
                cipher.encrypt(data, tracer=tracer)
        except SBurgerError as e:
            _fail(str(e))

        # Invert on a copy to confirm the block round-trips
        check = bytearray(data)
        if do_decrypt:
            cipher.encrypt(check)
        else:
            cipher.decrypt(check)
        passed = bytes(check) == original

        if verbose:
            label = "Plaintext" if do_decrypt else "Ciphertext"
            print_result(label, bytes_to_hex(data), len(cipher.network.steps), passed)
        else:
            click.echo(bytes_to_hex(data))

    finally:
        if trace_file:
            trace_file.close()


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=click.IntRange(min=0),
    default=100,
    help="Number of random round-trip tests (default: 100)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducibility",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show detailed output",
)
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate against known-answer vectors and random round trips."""
    click.echo("Running known-answer tests...")
    kat_passed = 0

    for vec in KNOWN_ANSWER_VECTORS:
        ok, detail = validate_vector(vec)
        if ok:
            kat_passed += 1
            if verbose:
                click.echo(f"  {vec['name']}: PASS")
        else:
            click.echo(f"  {vec['name']}: FAIL - {detail}")

    click.echo(f"Known-answer tests: {kat_passed}/{len(KNOWN_ANSWER_VECTORS)} passed")

    click.echo(f"\nRunning {num_tests} random round-trip tests...")

    if seed is not None:
        rnd = random.Random(seed)
        random_bytes = lambda n: bytes(rnd.randint(0, 255) for _ in range(n))
        random_length = lambda: rnd.randint(1, SBurger256.MAX_BLOCK_SIZE)
    else:
        random_bytes = secrets.token_bytes
        random_length = lambda: secrets.randbelow(SBurger256.MAX_BLOCK_SIZE) + 1

    random_passed = 0
    for i in range(num_tests):
        key = random_bytes(SBurger256.KEY_LENGTH)
        if not any(key):
            key = bytes([1]) + key[1:]
        pt = random_bytes(random_length())

        cipher = new_cipher(key)
        ct = bytes(cipher.encrypt(bytearray(pt)))
        rt = bytes(cipher.decrypt(bytearray(ct)))

        if rt == pt:
            random_passed += 1
        elif verbose:
            click.echo(f"  Random test {i+1}: FAIL - key={key.hex()} pt={pt.hex()}")

    click.echo(f"Random tests: {random_passed}/{num_tests} passed")

    total_passed = kat_passed + random_passed
    total_tests = len(KNOWN_ANSWER_VECTORS) + num_tests

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
