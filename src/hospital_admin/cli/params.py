"""click parameter types for values typed at the menu prompts."""

from decimal import Decimal, InvalidOperation

import click

DATETIME_FORMATS = ["%Y-%m-%d %H:%M"]


class AmountType(click.ParamType):
    """A non-negative currency amount parsed into a Decimal."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            amount = value
        else:
            try:
                amount = Decimal(str(value).replace(",", "").strip())
            except InvalidOperation:
                self.fail(f"{value!r} is not a valid amount", param, ctx)
        if not amount.is_finite() or amount < 0:
            self.fail(f"{value!r} must be zero or a positive amount", param, ctx)
        return amount


AMOUNT = AmountType()
WHEN = click.DateTime(formats=DATETIME_FORMATS)
