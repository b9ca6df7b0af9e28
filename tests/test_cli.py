"""Tests for CLI module."""

import json
from pathlib import Path

import pytest

from invonest.cli import cmd_version, load_request, main

CSV_ITEMS = """Description,HSN,Quantity,Unit,Rate,Discount,GST
Software development,9954,2,Nos,1000,0,18
"""


@pytest.fixture
def request_file(tmp_path: Path) -> Path:
    payload = {
        "sellerState": "Maharashtra",
        "buyerState": "Karnataka",
        "items": [
            {
                "description": "Software development",
                "hsn": "9954",
                "quantity": 2,
                "unit": "Nos",
                "rate": 1000,
                "taxRate": 18,
            }
        ],
    }
    path = tmp_path / "invoice.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.csv"
    path.write_text(CSV_ITEMS, encoding="utf-8")
    return path


class TestLoadRequest:
    def test_json_request(self, request_file):
        seller, buyer, items = load_request(request_file, None, None)

        assert seller == "Maharashtra"
        assert buyer == "Karnataka"
        assert len(items) == 1

    def test_command_line_states_take_precedence(self, request_file):
        seller, buyer, _ = load_request(request_file, None, "Maharashtra")

        assert seller == "Maharashtra"
        assert buyer == "Maharashtra"

    def test_csv_items(self, csv_file):
        seller, buyer, items = load_request(csv_file, "Goa", "Goa")

        assert (seller, buyer) == ("Goa", "Goa")
        assert items[0].hsn_code == "9954"

    def test_unsupported_type(self, tmp_path):
        path = tmp_path / "items.txt"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError, match="Unsupported file type"):
            load_request(path, None, None)


class TestCmdCalculate:
    def test_inter_state_table(self, request_file, capsys):
        result = main(["calculate", str(request_file)])

        assert result == 0
        output = capsys.readouterr().out
        assert "Inter-state (IGST)" in output
        assert "IGST:" in output
        assert "₹2,360.00" in output
        assert "Two Thousand Three Hundred Sixty Rupees Only" in output

    def test_csv_with_states(self, csv_file, capsys):
        result = main(
            ["calculate", str(csv_file), "--seller-state", "Goa", "--buyer-state", "Goa"]
        )

        assert result == 0
        output = capsys.readouterr().out
        assert "Intra-state (CGST + SGST)" in output
        assert "CGST:" in output
        assert "₹180.00" in output

    def test_json_output(self, request_file, capsys):
        result = main(["calculate", str(request_file), "--json"])

        assert result == 0
        body = json.loads(capsys.readouterr().out)
        assert body["success"] is True
        assert body["data"]["totalIGST"] == 360.0
        assert body["data"]["grandTotal"] == 2360.0

    def test_rounding_option(self, tmp_path, capsys):
        csv_file = tmp_path / "items.csv"
        csv_file.write_text(
            "Description,HSN,Quantity,Rate,GST\nA,9954,1,10.05,18\nB,9954,1,10.05,18\n",
            encoding="utf-8",
        )
        args = ["calculate", str(csv_file), "--seller-state", "Goa", "--buyer-state", "Goa", "--json"]

        main(args)
        per_invoice = json.loads(capsys.readouterr().out)
        main(args + ["--rounding", "per_item"])
        per_item = json.loads(capsys.readouterr().out)

        assert per_invoice["data"]["grandTotal"] == 23.72
        assert per_item["data"]["grandTotal"] == 23.7

    def test_missing_state(self, csv_file, capsys):
        result = main(["calculate", str(csv_file)])

        assert result == 1
        assert "No calculation available (state_required)" in capsys.readouterr().out

    def test_file_not_found(self, tmp_path, capsys):
        result = main(["calculate", str(tmp_path / "missing.json")])

        assert result == 1
        assert "File not found" in capsys.readouterr().out

    def test_malformed_request(self, tmp_path, capsys):
        path = tmp_path / "invoice.json"
        path.write_text(json.dumps({"items": [{"hsn": "9954"}]}), encoding="utf-8")

        result = main(["calculate", str(path)])

        assert result == 1
        assert "Invalid calculation request" in capsys.readouterr().out


class TestCmdGstin:
    def test_valid(self, capsys):
        result = main(["gstin", "27AAPFU0939F1ZV"])

        assert result == 0
        assert "27AAPFU0939F1ZV: valid (state code 27, Maharashtra)" in capsys.readouterr().out

    def test_invalid(self, capsys):
        result = main(["gstin", "BOGUS"])

        assert result == 1
        assert "invalid GSTIN format" in capsys.readouterr().out


class TestCmdHsn:
    def test_lookup(self, capsys):
        assert main(["hsn", "3004"]) == 0
        assert "3004: 12% (Medicaments)" in capsys.readouterr().out

    def test_unknown_code(self, capsys):
        assert main(["hsn", "4820"]) == 0
        assert "default rate" in capsys.readouterr().out

    def test_list(self, capsys):
        assert main(["hsn"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 20


class TestCmdStates:
    def test_lists_all_states(self, capsys):
        assert main(["states"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 36
        assert lines[0] == "35  AN  Andaman and Nicobar Islands"


class TestCmdNextNumber:
    def test_increments(self, capsys):
        result = main(["next-number", "--last", "INV-202403-0009", "--date", "2024-03-20"])

        assert result == 0
        assert capsys.readouterr().out.strip() == "INV-202403-0010"

    def test_invalid_last_number(self, capsys):
        result = main(["next-number", "--last", "nope", "--date", "2024-03-20"])

        assert result == 1
        assert "Invalid invoice number" in capsys.readouterr().out

    def test_invalid_date(self, capsys):
        result = main(["next-number", "--date", "20-03-2024"])

        assert result == 1
        assert "Invalid date" in capsys.readouterr().out


class TestCmdWords:
    def test_amount(self, capsys):
        assert main(["words", "2360.50"]) == 0
        assert capsys.readouterr().out.strip() == (
            "Two Thousand Three Hundred Sixty Rupees and Fifty Paise Only"
        )

    def test_invalid_amount(self, capsys):
        assert main(["words", "abc"]) == 1
        assert "Invalid amount" in capsys.readouterr().out


class TestCmdVersion:
    def test_prints_version(self, capsys):
        class Args:
            pass

        result = cmd_version(Args())

        assert result == 0
        assert "InvoNest v0.1.0" in capsys.readouterr().out


class TestMain:
    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "usage: invonest" in capsys.readouterr().out

    def test_version_command(self, capsys):
        assert main(["version"]) == 0
        assert "InvoNest" in capsys.readouterr().out
