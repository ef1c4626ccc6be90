# fincli

Finance calculators on the command line. Amounts are worked out in
decimal arithmetic and rounded half away from zero when shown.

## Installation

```
pip install .
```

This installs the `fin` command.

## Usage

```
fin --help
```

Running `fin`, or a command group without a command, prints its help.
When a calculation fails, for example because slice allocations add up to
more than 100, the error is printed to standard error as `Error: ...` and
the command exits with status 1.

### Real estate

Work out a mortgage's monthly payment, total cost and payoff time:

```
fin real-estate mortgage --amount 300_000 --rate 6.5
```

Options:

- `-a`, `--amount`: the loan amount borrowed (required)
- `-r`, `--rate`: annual interest rate in percent (required)
- `-y`, `--years`: loan term in years (default 30)
- `--extra-monthly`: extra principal paid every month
- `--extra-annual`: extra principal paid every twelfth month
- `--monthly-schedule`: print the full monthly amortization schedule
- `--annual-schedule`: print the amortization schedule totalled by year
  (a final partial year is not shown)

The two schedule options cannot be used together. Underscores in numbers
are ignored, so `300_000` and `300000` mean the same amount. When extra
payments make the average monthly payment differ from the fixed one, the
average is printed too. The rate must not be zero.

Work out the up-front and monthly costs of buying a home:

```
fin real-estate purchase --price 400000 --rate 6.5 --taxes 4800 --insurance 1200
```

Options:

- `-p`, `--price`: home price (required)
- `-r`, `--rate`: mortgage interest rate in percent (required)
- `-d`, `--down`: down payment percent (default 20)
- `-y`, `--years`: mortgage term in years (default 30)
- `--closing-percent`: estimated closing costs as a percent (default 3)
- `--escrows`: estimate of prepaid escrow costs
- `-t`, `--taxes`: annual property taxes
- `-i`, `--insurance`: annual homeowners insurance
- `--pmi`: PMI rate, as a fraction of the loan amount per year
- `--hoa`: monthly HOA fee

HOA and PMI lines appear only when they are above zero.

### Investing

Work out your FIRE number, the savings needed to cover annual expenses at
a given safe withdrawal rate:

```
fin invest fire-number --expenses 40000 --swr 4
```

`--swr` is a percent and defaults to 4.

Split a portfolio's total across named slices:

```
fin invest rebalance -t 10000 -t 5000 -s VTI:60 -s BND:40
```

Each `--slice` is `NAME:ALLOCATION`, where the allocation is a whole
percent between -128 and 127. The allocations may not add up to more
than 100. Each `--total` takes a number or a comma-separated list of
numbers, all of which are added to the portfolio total.

## Library use

The calculations are available from Python as well:

```python
from decimal import Decimal
from fincli.mortgage import calculate_schedule, extra_monthly_payment

schedule = calculate_schedule(
    Decimal("300000"),
    Decimal("6.5") / 100 / 12,
    Decimal("360"),
    extra_monthly_payment(Decimal("200")),
)
print(schedule.num_periods, schedule.total_interest)
```

- `fincli.mortgage`: `calculate_monthly_payment`, `calculate_schedule`,
  the `Payment` and `Schedule` classes, and the strategies
  `no_extra_payment`, `extra_monthly_payment`, `extra_annual_payment` and
  `extra_monthly_and_annual_payment`.
- `fincli.realestate`: `PurchaseOptions`, `purchase_report_lines`,
  `extra_payment_strategy`, `mortgage_summary_lines`,
  `monthly_schedule_lines` and `annual_schedule_lines`, which return the
  report lines the commands print.
- `fincli.invest`: `fire_number`, `Slice`, `parse_slice`, `parse_slices`
  and `rebalance_lines`.
- `fincli.finance`: `Percent` and `Rate`, built from a value in percent,
  with `apply_to`; `RateFrequency` names annual, monthly, biweekly and
  weekly rates.
- `fincli.money`: `parse_decimal`, `string_fixed`, `to_money` and
  `format_money`, which turns a decimal into a dollar string with
  thousands separators, such as `$1,234.50`.

## Running the tests

```
pip install ".[test]"
pytest
```