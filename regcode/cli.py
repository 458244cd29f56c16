"""
regcode command line tool

Commands:
- keygen: generate an X25519 key pair as hex key files
- encrypt / decrypt: raw string encryption with the key files
- issue: create a registration code for an email
- decode: open a registration code and report its expiry
- password: salted digests and random strings
"""

from typing import Optional

import click

from regcode import __version__
from regcode import crypto, passwords
from regcode.codec import generate_code, decode_code, is_expired
from regcode.config import load_settings
from regcode.errors import RegCodeError
from regcode.keys import load_key, write_keypair
from regcode.logger import get_logger


def _load(path: str) -> bytes:
    try:
        return load_key(path)
    except FileNotFoundError as e:
        raise click.ClickException(f"Reading key file failed: {path}") from e


def _fail(e: RegCodeError) -> click.ClickException:
    return click.ClickException(f"{type(e).__name__}: {e}")


@click.group()
@click.version_option(__version__, prog_name="regcode")
@click.option("--log-level", default=None, help="Override REGCODE_LOG_LEVEL.")
@click.pass_context
def app(ctx: click.Context, log_level: Optional[str]):
    """Issue and verify registration codes sealed with X25519 keys."""
    try:
        settings = load_settings({"log_level": log_level})
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    get_logger(level=settings.log_level, to_file=settings.log_file)
    ctx.obj = settings


@app.command()
@click.option("--out-dir", default=".", type=click.Path(file_okay=False), help="Directory for the key files.")
def keygen(out_dir: str):
    """Generate a new key pair (private.key / public.key)."""
    private_path, public_path = write_keypair(out_dir)
    click.echo("Generated key pair")
    click.echo(f"Private key: {private_path}")
    click.echo(f"Public key: {public_path}")


@app.command()
@click.argument("text")
@click.option("--public-key", "public_key", default=None, help="Public key file.")
@click.pass_obj
def encrypt(settings, text: str, public_key: Optional[str]):
    """Encrypt TEXT with the public key, print hex ciphertext."""
    pk = _load(public_key or settings.public_key_path)
    try:
        enc = crypto.encrypt_to_hex(text, pk)
    except RegCodeError as e:
        raise _fail(e) from e
    click.echo(f"Encrypted (hex): {enc}")


@app.command()
@click.argument("data_hex", metavar="HEX")
@click.option("--private-key", "private_key", default=None, help="Private key file.")
@click.pass_obj
def decrypt(settings, data_hex: str, private_key: Optional[str]):
    """Decrypt hex ciphertext with the private key."""
    sk = _load(private_key or settings.private_key_path)
    try:
        dec = crypto.decrypt_from_hex(data_hex, sk)
    except RegCodeError as e:
        raise _fail(e) from e
    click.echo(f"Decrypted: {dec}")


@app.command()
@click.argument("email")
@click.option("--days", type=int, default=None, help="Validity in days (may be negative).")
@click.option("--public-key", "public_key", default=None, help="Public key file.")
@click.pass_obj
def issue(settings, email: str, days: Optional[int], public_key: Optional[str]):
    """Create a registration code for EMAIL."""
    pk = _load(public_key or settings.public_key_path)
    if days is None:
        days = settings.default_days
    try:
        code = generate_code(email, days, pk)
    except RegCodeError as e:
        raise _fail(e) from e
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--days") from e
    click.echo(f"Register code: {code}")


@app.command()
@click.argument("code")
@click.option("--private-key", "private_key", default=None, help="Private key file.")
@click.pass_obj
def decode(settings, code: str, private_key: Optional[str]):
    """Decode a registration code."""
    sk = _load(private_key or settings.private_key_path)
    try:
        email, expire_time = decode_code(code.strip(), sk)
    except RegCodeError as e:
        raise _fail(e) from e
    click.echo(f"Email: {email}")
    click.echo(f"Expire time: {expire_time.isoformat()}")
    click.echo(f"Status: {'expired' if is_expired(expire_time) else 'valid'}")


@app.group()
@click.pass_obj
def password(settings):
    """Salted password digests."""
    if not settings.passwords_enabled:
        raise click.UsageError("password utilities are disabled (REGCODE_ENABLE_PASSWORDS=0)")


@password.command("hash")
@click.argument("plain", metavar="PASSWORD")
@click.option("--salt", default=None, help="Salt to use; a random one is generated when omitted.")
def hash_cmd(plain: str, salt: Optional[str]):
    """Print the salt and digest for PASSWORD."""
    salt = salt if salt is not None else passwords.new_salt()
    click.echo(f"Salt: {salt}")
    click.echo(f"Digest: {passwords.hash_password(plain, salt)}")


@password.command("verify")
@click.argument("plain", metavar="PASSWORD")
@click.option("--salt", required=True)
@click.option("--digest", required=True)
@click.pass_context
def verify_cmd(ctx: click.Context, plain: str, salt: str, digest: str):
    """Check PASSWORD against a stored digest."""
    if passwords.verify_password(plain, salt, digest):
        click.echo("Match")
        return
    click.echo("No match")
    ctx.exit(1)


@password.command("random")
@click.option("--length", default=16, type=click.IntRange(min=0), show_default=True)
def random_cmd(length: int):
    """Print a random alphanumeric string."""
    click.echo(passwords.random_string(length))


def main():
    app()


if __name__ == "__main__":
    main()
