"""An auction house that tracks bids per item and keeps prices in a search tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from dsakit.bst import ListBST

SEPARATOR = "=" * 30


@dataclass
class Item:
    """An item on sale with its bidding record."""

    name: str
    current_bid: int
    total_bids: int = 0
    successful: int = 0
    rejected: int = 0


class Auction:
    """Items in the order they were added, with current bids mirrored in a tree."""

    def __init__(self) -> None:
        self.items: dict[str, Item] = {}
        self.tree: ListBST[str, int] = ListBST()

    def _item(self, name: str) -> Item:
        try:
            return self.items[name]
        except KeyError:
            raise KeyError(f"no item named {name!r}") from None

    def add_item(self, name: str, start: int) -> bool:
        """Put an item up for sale; return False if it is already listed."""
        if name in self.items:
            return False
        self.items[name] = Item(name, start)
        self.tree.insert(name, start)
        return True

    def bid(self, name: str, amount: int) -> bool:
        """Place a bid; it is accepted only if it beats the current bid."""
        item = self._item(name)
        item.total_bids += 1
        if amount > item.current_bid:
            item.current_bid = amount
            item.successful += 1
            self.tree.update(name, amount)
            return True
        item.rejected += 1
        return False

    def check(self, name: str) -> int:
        """Return the current bid for an item."""
        return self._item(name).current_bid

    def stats(self, name: str) -> Item:
        """Return the bidding record of an item."""
        return self._item(name)

    def report(self) -> str:
        """Summarise all bidding, listing items alphabetically."""
        records = list(self.items.values())
        lines = [
            "Auction Report:",
            f"Total items: {len(records)}",
            f"Total bids placed: {sum(i.total_bids for i in records)}",
            f"Total successful bids: {sum(i.successful for i in records)}",
            f"Total rejected bids: {sum(i.rejected for i in records)}",
            "",
            "Item Statistics:",
        ]
        for item in sorted(records, key=lambda i: i.name):
            lines.append(
                f"  {item.name}: Current bid: {item.current_bid}, "
                f"Total bids: {item.total_bids}, Successful: {item.successful}, "
                f"Rejected: {item.rejected}"
            )
        return "".join(line + "\n" for line in lines)

    def __contains__(self, name: str) -> bool:
        return name in self.items


def run_script(text: str) -> str:
    """Load the initial items, run the auction commands and return the output.

    The text starts with a count and that many name/bid pairs, then holds
    BID, CHECK, STATS, ADD and REPORT commands. Commands naming an unknown
    item (or ADD of a known one) print nothing but the separator. Processing
    stops at missing or malformed input.
    """
    tokens = iter(text.split())
    auction = Auction()
    out: list[str] = []
    loaded = True
    try:
        for _ in range(int(next(tokens))):
            name = next(tokens)
            auction.add_item(name, int(next(tokens)))
    except (StopIteration, ValueError):
        loaded = False

    def tree_line() -> str:
        return f"BST (In-order): {auction.tree.render('I')}\n"

    out.append("Initial auction items:\n")
    out.append(tree_line())
    out.append("\nAuction starts!\n\n")
    out.append(SEPARATOR + "\n")
    if not loaded:
        return "".join(out)

    try:
        for command in tokens:
            if command == "BID":
                name = next(tokens)
                amount = int(next(tokens))
                if name in auction:
                    if auction.bid(name, amount):
                        out.append(f"Bid of {amount} on {name} accepted. Current bid: {amount}\n")
                    else:
                        current = auction.check(name)
                        out.append(f"Bid of {amount} on {name} rejected. Current bid: {current}\n")
                    out.append(tree_line())
            elif command == "CHECK":
                name = next(tokens)
                if name in auction:
                    out.append(f"Current bid for {name}: {auction.check(name)}\n")
                    out.append(tree_line())
            elif command == "STATS":
                name = next(tokens)
                if name in auction:
                    item = auction.stats(name)
                    out.append(f"Statistics for {name}:\n")
                    out.append(f"  Current highest bid: {item.current_bid}\n")
                    out.append(f"  Total bids placed: {item.total_bids}\n")
                    out.append(f"  Successful bids: {item.successful}\n")
                    out.append(f"  Rejected bids: {item.rejected}\n")
            elif command == "ADD":
                name = next(tokens)
                start = int(next(tokens))
                if auction.add_item(name, start):
                    out.append(f"Item {name} added with starting bid {start}\n")
                    out.append(tree_line())
            elif command == "REPORT":
                out.append(auction.report())
            out.append(SEPARATOR + "\n")
    except (StopIteration, ValueError):
        pass
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Run the auction file named on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: filename", file=sys.stderr)
        return 1
    try:
        text = Path(argv[0]).read_text(encoding="utf-8")
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    sys.stdout.write(run_script(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())