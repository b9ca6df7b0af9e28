"""Command-line interface for InvoNest."""

import argparse
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from invonest import __version__
from invonest.api.schemas import CalculationData, CalculationRequest, CalculationResponse
from invonest.container import get_container
from invonest.domain.invoice import CalculationResult, LineItem
from invonest.domain.states import list_states
from invonest.domain.value_objects import RoundingStrategy
from invonest.exceptions import InvalidAmountError, InvalidInvoiceNumberError
from invonest.logging_config import configure_logging
from invonest.parsers.csv_parser import LineItemCSVParser
from invonest.services.amounts import amount_in_words, format_inr
from invonest.services.gst_calculator import GSTCalculator
from invonest.services.gstin import check_gstin
from invonest.services.numbering import next_invoice_number


def load_request(
    file_path: Path, seller_state: str | None, buyer_state: str | None
) -> tuple[str | None, str | None, list[LineItem]]:
    """Load line items and states from a JSON request or a CSV of line items.

    States given on the command line take precedence over the file.

    Raises:
        ValueError: If the file type is not supported.
        pydantic.ValidationError: If a JSON request is malformed.
    """
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        request = CalculationRequest.model_validate_json(
            file_path.read_text(encoding="utf-8")
        )
        return (
            seller_state or request.seller_state,
            buyer_state or request.buyer_state,
            request.to_line_items(),
        )
    if suffix == ".csv":
        return seller_state, buyer_state, LineItemCSVParser().parse(str(file_path))
    raise ValueError(f"Unsupported file type: {file_path.suffix or file_path.name}")


def _print_calculation(result: CalculationResult, currency_label: str) -> None:
    totals = result.totals
    assert totals is not None

    regime = "Inter-state (IGST)" if result.is_inter_state else "Intra-state (CGST + SGST)"
    print(f"Tax regime: {regime}")
    print()
    print(f"{'#':>3}  {'Description':<30} {'HSN':<8} {'Taxable':>14} {'Tax':>12} {'Total':>14}")
    for index, line in enumerate(result.items, start=1):
        print(
            f"{index:>3}  {line.item.description[:30]:<30} {line.item.hsn_code[:8]:<8} "
            f"{format_inr(line.taxable_amount):>14} {format_inr(line.tax_amount):>12} "
            f"{format_inr(line.total_amount):>14}"
        )
    if result.excluded_indexes:
        skipped = ", ".join(str(i + 1) for i in result.excluded_indexes)
        print(f"Skipped invalid items: {skipped}")
    print()
    print(f"  Subtotal:        {format_inr(totals.subtotal):>16}")
    print(f"  Discount:        {format_inr(totals.total_discount):>16}")
    print(f"  Taxable amount:  {format_inr(totals.taxable_amount):>16}")
    if result.is_inter_state:
        print(f"  IGST:            {format_inr(totals.total_igst):>16}")
    else:
        print(f"  CGST:            {format_inr(totals.total_cgst):>16}")
        print(f"  SGST:            {format_inr(totals.total_sgst):>16}")
    print(f"  Total tax:       {format_inr(totals.total_tax):>16}")
    print(f"  Grand total:     {format_inr(totals.grand_total):>16}")
    print(f"  {amount_in_words(totals.grand_total, currency_label)}")


def cmd_calculate(args: argparse.Namespace) -> int:
    """Calculate GST and invoice totals for a file of line items."""
    file_path = Path(args.file)

    if not file_path.exists():
        print(f"Error: File not found: {file_path}")
        return 1

    try:
        seller_state, buyer_state, items = load_request(
            file_path, args.seller_state, args.buyer_state
        )
    except ValidationError as e:
        print(f"Error: Invalid calculation request: {e.error_count()} problem(s)")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            print(f"  - {location}: {error['msg']}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    container = get_container()
    rounding = RoundingStrategy(args.rounding) if args.rounding else None
    calculator = container.calculator
    if rounding is not None and rounding is not calculator.rounding:
        calculator = GSTCalculator(rate_lookup=container.hsn_table, rounding=rounding)

    result = calculator.calculate(seller_state, buyer_state, items)
    if not result.is_available:
        print(f"No calculation available ({result.status.value}): {result.message}")
        return 1

    currency_label = container.settings.currency_label
    if args.json:
        words = amount_in_words(result.totals.grand_total, currency_label)  # type: ignore[union-attr]
        response = CalculationResponse(data=CalculationData.from_result(result, words))
        print(response.model_dump_json(by_alias=True, indent=2))
    else:
        _print_calculation(result, currency_label)
    return 0


def cmd_gstin(args: argparse.Namespace) -> int:
    """Validate a GST identification number."""
    validation = check_gstin(args.gstin)
    if not validation.is_valid:
        print(f"{args.gstin}: invalid GSTIN format")
        return 1

    state = validation.state.name if validation.state else "unknown state"
    print(f"{validation.gstin}: valid (state code {validation.state_code}, {state})")
    return 0


def cmd_hsn(args: argparse.Namespace) -> int:
    """Show GST rates for HSN/SAC codes."""
    table = get_container().hsn_table

    if args.code:
        code = table.get(args.code)
        description = code.description if code else "not in table, default rate"
        print(f"{args.code}: {table.rate_for(args.code)}% ({description})")
        return 0

    for code in table.list_codes():
        print(f"{code.code:<6} {code.rate:>4}%  {code.description}")
    return 0


def cmd_states(args: argparse.Namespace) -> int:
    """List Indian states and union territories."""
    for state in list_states():
        print(f"{state.gst_code}  {state.abbreviation}  {state.name}")
    return 0


def cmd_next_number(args: argparse.Namespace) -> int:
    """Print the next invoice number."""
    try:
        issue_date = date.fromisoformat(args.date) if args.date else None
        print(next_invoice_number(args.last, issue_date))
    except InvalidInvoiceNumberError as e:
        print(f"Error: {e.message}")
        return 1
    except ValueError:
        print(f"Error: Invalid date: {args.date} (expected YYYY-MM-DD)")
        return 1
    return 0


def cmd_words(args: argparse.Namespace) -> int:
    """Spell out an amount in Indian numbering."""
    currency_label = get_container().settings.currency_label
    try:
        print(amount_in_words(args.amount, currency_label))
    except InvalidAmountError as e:
        print(f"Error: {e.message}")
        return 1
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_container().settings
    uvicorn.run(
        "invonest.api.app:app",
        host=args.host or settings.api_host,
        port=int(args.port or settings.api_port),
    )
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"InvoNest v{__version__}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="invonest",
        description="InvoNest - GST invoice calculation for Indian businesses",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # calculate command
    calculate_parser = subparsers.add_parser(
        "calculate", help="Calculate GST and totals for line items"
    )
    calculate_parser.add_argument(
        "file", help="JSON calculation request or CSV of line items"
    )
    calculate_parser.add_argument("--seller-state", help="Seller's state")
    calculate_parser.add_argument("--buyer-state", help="Buyer's state")
    calculate_parser.add_argument(
        "--rounding",
        choices=[s.value for s in RoundingStrategy],
        default=None,
        help="Rounding strategy (default from settings)",
    )
    calculate_parser.add_argument(
        "--json", action="store_true", help="Print the API response JSON"
    )
    calculate_parser.set_defaults(func=cmd_calculate)

    # gstin command
    gstin_parser = subparsers.add_parser("gstin", help="Validate a GSTIN")
    gstin_parser.add_argument("gstin", help="15-character GST identification number")
    gstin_parser.set_defaults(func=cmd_gstin)

    # hsn command
    hsn_parser = subparsers.add_parser("hsn", help="Show HSN/SAC GST rates")
    hsn_parser.add_argument("code", nargs="?", default=None, help="HSN/SAC code")
    hsn_parser.set_defaults(func=cmd_hsn)

    # states command
    states_parser = subparsers.add_parser("states", help="List Indian states")
    states_parser.set_defaults(func=cmd_states)

    # next-number command
    next_parser = subparsers.add_parser(
        "next-number", help="Generate the next invoice number"
    )
    next_parser.add_argument("--last", default=None, help="Last invoice number issued")
    next_parser.add_argument("--date", default=None, help="Issue date (YYYY-MM-DD)")
    next_parser.set_defaults(func=cmd_next_number)

    # words command
    words_parser = subparsers.add_parser("words", help="Spell out an amount")
    words_parser.add_argument("amount", help="Amount in rupees, e.g. 2360.50")
    words_parser.set_defaults(func=cmd_words)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", default=None, help="Port")
    serve_parser.set_defaults(func=cmd_serve)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging()

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
