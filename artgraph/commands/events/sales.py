"""
Sale ledger
"""

from artgraph.commands.accounts import resolve_account
from artgraph.commands.events import EventArgs, EventHandler
from artgraph.data.sale_log import TSaleLog
from artgraph.domain.artwork import sale_log_id
from artgraph.domain.events import SalePriceSet, Sold


class HandleSold(EventHandler[Sold]):
    """
    Logs the sale and transfers the artwork to the buyer
    """

    def __call__(self, args: EventArgs[Sold]):
        store, event = args.store, args.event
        artwork = self.load_artwork(store, event.token_id)
        if artwork is None:
            return

        buyer = resolve_account(store, event.buyer)
        seller = resolve_account(store, event.seller)
        timestamp = event.context.block_timestamp

        sale = store.save(
            TSaleLog(
                id=sale_log_id(event.token_id, buyer.id, seller.id, timestamp),
                amount=event.amount,
                buyer_id=buyer.id,
                seller_id=seller.id,
                item_id=artwork.id,
                timestamp=timestamp,
            )
        )

        artwork.append_sale(sale.id)
        artwork.last_sold_price = sale.amount
        store.save(artwork)

        artwork.owner_id = buyer.id
        artwork.on_sale = False
        store.save(artwork)


class HandleSalePriceSet(EventHandler[SalePriceSet]):
    """
    Lists the artwork for sale at the specified price
    """

    def __call__(self, args: EventArgs[SalePriceSet]):
        store, event = args.store, args.event
        artwork = self.load_artwork(store, event.token_id)
        if artwork is None:
            return

        artwork.sale_price = event.price
        artwork.on_sale = True
        store.save(artwork)
