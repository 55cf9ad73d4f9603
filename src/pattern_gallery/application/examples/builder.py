"""Builder example: a bank account assembled through chained calls."""

from pattern_gallery.domain.account import new_account_builder


def run() -> None:
    account = (
        new_account_builder("12345ABCDEF0123")
        .with_owner("Alamin Mahamud")
        .at_branch("Manchester")
        .with_opening_balance(1000000)
        .at_rate(2.5)
        .build()
    )
    print(account)
