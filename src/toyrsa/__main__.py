"""The Command Line Interface for the toy RSA utility, including Interactive elements.

A hybrid CLI/ICLI: exactly one operation flag selects what to do, and every value the operation needs is taken
from its option when given, or prompted for on standard input otherwise.

Typical usage example:

    toyrsa -g
    toyrsa -e --modulus 55 --exponent 3 --message "!"
    OR
    python -m toyrsa -c
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import random
import sys
import typing

import toyrsa
from toyrsa.errors import InvalidArgument
from toyrsa.errors import MalformedInput
from toyrsa.errors import ToyRSAError


def parse_int(text: str) -> int:
    """Parse an optionally signed ASCII decimal integer."""
    stripped = text.strip()
    digits = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedInput(f"Expected an integer, got {text!r}")
    return int(stripped)


def parse_ciphertext(text: str) -> list[int]:
    """Split whitespace separated ciphertext into its integer tokens."""
    tokens = text.split()
    for token in tokens:
        if not (token.isascii() and token.isdigit()):
            raise MalformedInput(f"Ciphertext token {token!r} is not a non-negative integer")
    return [int(token) for token in tokens]


class HelpData(typing.NamedTuple):
    description: str
    prompt: str
    format: typing.Callable = str
    minimum: int | None = None


help_dict: dict[str, HelpData] = {
    "modulus": HelpData("The key pair modulus.", "modulus: ", parse_int, 1),
    "public": HelpData("The public exponent.", "public key: ", parse_int, 0),
    "private": HelpData("The private exponent.", "private key: ", parse_int, 0),
    "message": HelpData("The message to encrypt.", "type message:\n"),
    "ciphertext": HelpData("Space separated ciphertext integers.", "type message:\n", parse_ciphertext),
}

needs = {
    "generate": (),
    "encrypt": ("modulus", "public", "message"),
    "decrypt": ("modulus", "private", "ciphertext"),
    "crack": ("modulus", "public"),
}


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> typing.NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


corep = _Parser(prog="toyrsa", add_help=False, description="The world's worst RSA implementation.")
modes = corep.add_mutually_exclusive_group(required=True)
modes.add_argument("-h",
                   "--help",
                   dest="command",
                   action="store_const",
                   const="help",
                   help="display this help message")
modes.add_argument("-g", dest="command", action="store_const", const="generate", help="generate keypair")
modes.add_argument("-e", dest="command", action="store_const", const="encrypt", help="encrypt a message")
modes.add_argument("-d", dest="command", action="store_const", const="decrypt", help="decrypt a message")
modes.add_argument("-c", dest="command", action="store_const", const="crack", help="crack a public key")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {toyrsa.__version__}")
corep.add_argument("--modulus", help=help_dict["modulus"].description)
corep.add_argument("--exponent", help="The public (encrypt, crack) or private (decrypt) exponent.")
corep.add_argument("--message", help="The message (encrypt) or ciphertext (decrypt).")
corep.add_argument("--keyspace",
                   type=int,
                   default=toyrsa.KEY_SPACE,
                   help=f"Upper bound for generated primes. Defaults to {toyrsa.KEY_SPACE}.")
corep.add_argument("--seed", type=int, help="Seed for reproducible key generation.")
corep.add_argument("--non-interactive", action="store_true", help="Fail instead of prompting for missing values")


def input_handler(arg: str, supplied: str | None, non_interactive: bool) -> typing.Any:
    """Resolve one required value from its option or an interactive prompt, then parse it."""
    helper_data = help_dict[arg]
    if supplied is None:
        if non_interactive:
            raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
        try:
            supplied = input(helper_data.prompt)
        except EOFError as exc:
            raise MalformedInput(f"No value given for {arg}") from exc
    value = helper_data.format(supplied)
    if helper_data.minimum is not None and value < helper_data.minimum:
        raise InvalidArgument(f"The {arg} must be at least {helper_data.minimum}, got {value}")
    return value


def format_private(d: int, phi: int, p: int, q: int) -> list[str]:
    return [
        f"private key: {d}",
        "(internal information)",
        f"phi:         {phi}",
        f"p,q:         {p},{q}",
    ]


def run(args: argparse.Namespace) -> list[str]:
    """Execute the selected operation and return its output lines."""
    supplied = {
        "modulus": args.modulus,
        "public": args.exponent,
        "private": args.exponent,
        "message": args.message,
        "ciphertext": args.message,
    }
    vals = {reqs: input_handler(reqs, supplied[reqs], args.non_interactive) for reqs in needs[args.command]}
    match args.command:
        case "generate":
            rng = random.Random(args.seed) if args.seed is not None else None
            kp = toyrsa.generate(args.keyspace, rng)
            return [f"modulus:     {kp.n}", f"public key:  {kp.e}"] + format_private(kp.d, kp.phi, kp.p, kp.q)
        case "encrypt":
            ciph = toyrsa.encrypt(vals["modulus"], vals["public"], vals["message"])
            return [" ".join(str(c) for c in ciph)]
        case "decrypt":
            return [toyrsa.decrypt(vals["modulus"], vals["private"], vals["ciphertext"])]
        case "crack":
            res = toyrsa.crack(vals["modulus"], vals["public"])
            return format_private(res.d, res.phi, res.p, res.q)


def main(argv: list[str] | None = None) -> None:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    if args.command == "help":
        corep.print_help()
        return
    try:
        lines = run(args)
    except (ToyRSAError, IOError) as exc:
        print(f"{corep.prog}: {exc}", file=sys.stderr)
        sys.exit(1)
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
