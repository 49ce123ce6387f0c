"""Interactive terminal front end for the BankSystem.

The console is presentation only. It turns typed command lines into ledger
calls, converts amounts with ``parse_amount`` at the boundary, and prints either
a success message or the ``message`` of the BankError that came back. It keeps
no state of its own and re-reads the ledger after every command.
"""

import argparse
import shlex
import sys
from typing import List, Optional, TextIO

from minibank.amounts import parse_amount
from minibank.bank_system import BankSystem
from minibank.config import BankSettings, get_settings
from minibank.errors import BankError
from minibank.logging_config import setup_logging
from minibank.models import BankAccount
from minibank.models.account import DISPLAY_TIME_FORMAT

DEMO_ACCOUNTS = [
    ("Alice Johnson", 50000, True),
    ("Bob Smith", 15000, False),
    ("Carol Davis", 30000, True),
]

PROMPT = "minibank> "


def format_currency(amount: float, symbol: str = "₹") -> str:
    """Format an amount with Indian digit grouping and two decimals.

    Example:
        ```python
        format_currency(150000)     # "₹1,50,000.00"
        format_currency(999.5)      # "₹999.50"
        ```
    """
    sign = "-" if amount < 0 else ""
    whole, fraction = f"{abs(amount):.2f}".split(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    return f"{sign}{symbol}{whole}.{fraction}"


def render_account(account: BankAccount, symbol: str = "₹") -> str:
    badge = "✓ KYC Verified" if account.is_kyc_verified else "✗ Not Verified"
    return (
        f"[{account.initials}] {account.holder_name}  {account.account_number}  {badge}\n"
        f"     Current Balance: {format_currency(account.balance, symbol)}"
    )


def render_accounts(bank: BankSystem, symbol: str = "₹") -> str:
    summary = bank.get_summary()
    lines = [
        f"Accounts: {summary.total_accounts} | "
        f"KYC verified: {summary.kyc_verified_accounts} | "
        f"Total balance: {format_currency(summary.total_balance, symbol)}"
    ]
    accounts = bank.list_accounts()
    if not accounts:
        lines.append("No accounts yet. Create your first account to get started.")
    lines.extend(render_account(a, symbol) for a in accounts)
    return "\n".join(lines)


def render_senders(bank: BankSystem) -> str:
    senders = bank.list_kyc_verified_accounts()
    if not senders:
        return "No KYC-verified accounts."
    return "\n".join(f"{a.account_number}  {a.holder_name} ✓" for a in senders)


def render_log(bank: BankSystem, time_format: str = DISPLAY_TIME_FORMAT) -> str:
    entries = bank.get_log()
    lines = [f"Transactions: {len(entries)}"]
    if not entries:
        lines.append("No transactions yet.")
    for entry in entries:
        lines.append(
            f"#{entry.id} [{entry.label}] {entry.format_timestamp(time_format)} "
            f"{entry.status.value}"
        )
        lines.append(f"    {entry.details}")
    return "\n".join(lines)


def seed_demo_accounts(bank: BankSystem) -> List[BankAccount]:
    """Open the three demo accounts: two KYC-verified, one not."""
    return [
        bank.create_account(name, balance, is_kyc_verified=kyc)
        for name, balance, kyc in DEMO_ACCOUNTS
    ]


class CommandError(Exception):
    """A command line that could not be parsed."""


class _CommandParser(argparse.ArgumentParser):
    def error(self, message):
        raise CommandError(message)

    def exit(self, status=0, message=None):
        raise CommandError(message or "")


def build_command_parser() -> argparse.ArgumentParser:
    parser = _CommandParser(
        prog="minibank",
        add_help=False,
        description="Quote names that contain spaces or quotes, e.g. create \"Mary O'Neil\".",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    create = commands.add_parser("create", add_help=False, help="open an account")
    create.add_argument("name", nargs="+")
    create.add_argument("--balance", default="")
    create.add_argument("--kyc", action="store_true")

    deposit = commands.add_parser("deposit", add_help=False, help="deposit into an account")
    deposit.add_argument("account")
    deposit.add_argument("amount")

    withdraw = commands.add_parser("withdraw", add_help=False, help="withdraw from an account")
    withdraw.add_argument("account")
    withdraw.add_argument("amount")

    transfer = commands.add_parser("transfer", add_help=False,
                                   help="transfer from a KYC-verified account")
    transfer.add_argument("sender")
    transfer.add_argument("receiver")
    transfer.add_argument("amount")

    commands.add_parser("accounts", add_help=False, help="list accounts")
    commands.add_parser("senders", add_help=False, help="list KYC-verified accounts")
    commands.add_parser("log", add_help=False, help="show the transaction log")
    commands.add_parser("clear-log", add_help=False, help="clear the transaction log")
    commands.add_parser("help", add_help=False, help="show this help")
    commands.add_parser("quit", aliases=["exit"], add_help=False, help="leave the console")
    return parser


class BankConsole:
    """Line-oriented console over a BankSystem.

    Usage Example:
        ```python
        bank = BankSystem()
        console = BankConsole(bank)
        console.execute("create Alice Johnson --balance 500 --kyc")
        console.execute("accounts")
        console.run()  # reads stdin until quit/EOF
        ```
    """

    def __init__(self, bank: BankSystem, settings: Optional[BankSettings] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.bank = bank
        self.settings = settings or bank.settings
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.parser = build_command_parser()

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _money(self, amount: float) -> str:
        return format_currency(amount, self.settings.currency_symbol)

    def execute(self, line: str) -> bool:
        """Run one command line.

        Returns:
            bool: False when the console should stop, True otherwise
        """
        try:
            argv = shlex.split(line)
        except ValueError:
            # unbalanced quote, as in a name like O'Brien
            argv = line.split()
        if not argv:
            return True

        try:
            args = self.parser.parse_args(argv)
        except CommandError as e:
            self._print(f"Error: {e}".rstrip())
            self._print("Type 'help' for the list of commands.")
            return True

        if args.command in ("quit", "exit"):
            return False

        try:
            self._dispatch(args)
        except BankError as e:
            self._print(f"Error: {e.message}")
        return True

    def _dispatch(self, args: argparse.Namespace) -> None:
        if args.command == "create":
            balance = parse_amount(args.balance, field="initial balance", default=0)
            account = self.bank.create_account(" ".join(args.name), balance,
                                               is_kyc_verified=args.kyc)
            self._print(
                f"Account created! Account No: {account.account_number}, "
                f"Balance: {self._money(account.balance)}."
            )
        elif args.command == "deposit":
            amount = parse_amount(args.amount)
            account = self.bank.deposit(args.account, amount)
            self._print(
                f"{self._money(amount)} deposited to {account.holder_name}. "
                f"New balance: {self._money(account.balance)}."
            )
        elif args.command == "withdraw":
            amount = parse_amount(args.amount)
            account = self.bank.withdraw(args.account, amount)
            self._print(
                f"{self._money(amount)} withdrawn from {account.holder_name}. "
                f"New balance: {self._money(account.balance)}."
            )
        elif args.command == "transfer":
            amount = parse_amount(args.amount)
            result = self.bank.transfer(args.sender, args.receiver, amount)
            self._print(
                f"{self._money(amount)} transferred from {result.sender.holder_name} "
                f"to {result.receiver.holder_name}. "
                f"Sender balance: {self._money(result.sender.balance)} | "
                f"Receiver balance: {self._money(result.receiver.balance)}."
            )
        elif args.command == "accounts":
            self._print(render_accounts(self.bank, self.settings.currency_symbol))
        elif args.command == "senders":
            self._print(render_senders(self.bank))
        elif args.command == "log":
            self._print(render_log(self.bank, self.settings.timestamp_format))
        elif args.command == "clear-log":
            self.bank.clear_log()
            self._print("Transaction log cleared.")
        else:
            self._print(self.parser.format_help())

    def run(self) -> int:
        """Read and execute commands until ``quit`` or end of input."""
        self._print("MiniBank console. Type 'help' for commands.")
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self._print()
                return 0
            if not self.execute(line):
                return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="minibank", description="MiniBank demo console")
    parser.add_argument("--no-seed", action="store_true",
                        help="start without the demo accounts")
    parser.add_argument("--log-level", default=None, help="override MINIBANK_LOG_LEVEL")
    parser.add_argument("--log-format", choices=["text", "json"], default=None,
                        help="override MINIBANK_LOG_FORMAT")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(args.log_level or settings.log_level,
                  args.log_format or settings.log_format)

    bank = BankSystem(settings)
    if settings.seed_demo_accounts and not args.no_seed:
        seed_demo_accounts(bank)

    return BankConsole(bank, settings).run()
