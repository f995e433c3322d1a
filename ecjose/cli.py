"""Command line interface for ECDSA signing and verification."""

from __future__ import annotations

import asyncio
import binascii
import json
from pathlib import Path
from typing import Optional

import typer
from jwt.utils import base64url_decode, base64url_encode

from ecjose import EcJoseError, Key, get_algorithm, get_algorithms

app = typer.Typer(help="CLI for ECDSA JWS algorithms")


def _load_key(path: Path) -> Key:
    data = path.read_bytes()
    if data.lstrip().startswith(b"-----BEGIN"):
        return Key.from_pem(data)
    return Key.from_jwk(json.loads(data))


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    """ecjose CLI entry point."""
    pass


@app.command("keygen")
def keygen(
    curve: str = typer.Option("P-256", help="Curve: P-256, P-384 or P-521"),
    kid: Optional[str] = typer.Option(None, help="Key identifier to embed"),
    public: bool = typer.Option(False, help="Print only the public key"),
) -> None:
    """
    Generate an EC key and print it as a JWK.

    Example:
        ecjose keygen --curve P-384 --kid signer-1 > signer.jwk
    """
    try:
        key = Key.generate(curve, kid=kid)
    except EcJoseError as exc:
        _fail(str(exc))
    typer.echo(json.dumps(key.to_jwk(private=not public), indent=2))


@app.command("sign")
def sign(
    alg: str,
    key_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False),
) -> None:
    """
    Sign INPUT_FILE with the private key in KEY_FILE (JWK or PEM).

    Prints the base64url encoded r || s signature.

    Example:
        ecjose sign ES256 signer.jwk message.txt
    """
    try:
        algorithm = get_algorithm(alg)
        key = _load_key(key_file)
        result = asyncio.run(algorithm.sign(key, input_file.read_bytes()))
    except (EcJoseError, ValueError) as exc:
        _fail(f"Signing failed: {exc}")
    typer.echo(base64url_encode(result.mac).decode("ascii"))


@app.command("verify")
def verify(
    alg: str,
    key_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    input_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    signature: str = typer.Argument(...),
) -> None:
    """
    Verify a base64url SIGNATURE over INPUT_FILE with the key in KEY_FILE.

    Exits with code 1 if the signature does not verify.

    Example:
        ecjose verify ES256 signer.jwk message.txt MEUCIQ...
    """
    try:
        algorithm = get_algorithm(alg)
        key = _load_key(key_file)
        mac = base64url_decode(signature)
        asyncio.run(algorithm.verify(key, input_file.read_bytes(), mac))
    except binascii.Error as exc:
        _fail(f"Verification failed: invalid signature encoding: {exc}")
    except (EcJoseError, ValueError) as exc:
        _fail(f"Verification failed: {exc}")
    typer.echo("valid")


@app.command("backends")
def backends() -> None:
    """Show which backend serves each algorithm in this environment."""
    for algorithm in get_algorithms().values():
        typer.echo(
            f"{algorithm.name}\t{algorithm.curve}\t{algorithm.backend or 'unavailable'}"
        )
