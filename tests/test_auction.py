import pytest

from dsakit.auction import SEPARATOR, Auction, main, run_script


def test_add_item_once():
    auction = Auction()
    assert auction.add_item("Lamp", 100) is True
    assert auction.add_item("Lamp", 5) is False
    assert auction.check("Lamp") == 100


def test_bids_and_stats():
    auction = Auction()
    auction.add_item("Lamp", 100)
    assert auction.bid("Lamp", 150) is True
    assert auction.check("Lamp") == 150
    assert auction.bid("Lamp", 120) is False
    assert auction.bid("Lamp", 150) is False
    item = auction.stats("Lamp")
    assert item.total_bids == 3
    assert item.successful == 1
    assert item.rejected == 2
    assert auction.tree.get("Lamp") == 150


def test_unknown_item_raises():
    auction = Auction()
    with pytest.raises(KeyError):
        auction.bid("Ghost", 10)
    with pytest.raises(KeyError):
        auction.check("Ghost")
    with pytest.raises(KeyError):
        auction.stats("Ghost")


def test_report_is_alphabetical():
    auction = Auction()
    auction.add_item("Zebra", 10)
    auction.add_item("Apple", 20)
    auction.bid("Zebra", 30)
    report = auction.report()
    assert report.startswith("Auction Report:\n")
    assert report.index("  Apple:") < report.index("  Zebra:")
    assert "Total items: 2\n" in report
    assert "Total successful bids: 1\n" in report


def test_run_script():
    script = (
        "2\nVase 100\nClock 50\n"
        "BID Vase 120\nCHECK Clock\nSTATS Vase\nADD Clock 10\nREPORT\n"
    )
    output = run_script(script)
    assert output.startswith("Initial auction items:\nBST (In-order): ")
    assert "BST (In-order): (Clock:50) (Vase:100) " in output
    assert output.splitlines().count(SEPARATOR) == 6
    assert "Bid of 120 on Vase accepted. Current bid: 120" in output
    assert "Current bid for Clock: 50" in output
    assert "Statistics for Vase:" in output
    assert "Item Clock added" not in output
    assert "Total bids placed: 1" in output


def test_rejected_bid_in_script():
    output = run_script("1\nVase 100\nBID Vase 90\n")
    assert "Bid of 90 on Vase rejected. Current bid: 100" in output


def test_unknown_name_prints_only_separator():
    base = run_script("1\nVase 100\n")
    output = run_script("1\nVase 100\nBID Ghost 5\n")
    assert output == base + SEPARATOR + "\n"


def test_add_in_script_updates_tree():
    auction_output = run_script("0\nADD Rug 40\nCHECK Rug\n")
    assert "Item Rug added with starting bid 40" in auction_output
    assert "Current bid for Rug: 40" in auction_output


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage: filename" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.txt")]) == 1
    assert "Unable to open file" in capsys.readouterr().err


def test_main_runs_file(tmp_path, capsys):
    script = "1\nBook 5\nBID Book 9\nREPORT\n"
    path = tmp_path / "auction.txt"
    path.write_text(script)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == run_script(script)