"""
Materialized entity graph (accounts, artworks, bids, sales) built from the events
emitted by an NFT marketplace contract.
"""
