from wyvern_schemas import encode_buy, encode_sell, calldata_can_match
from wyvern_schemas.standards import ERC721_SCHEMA, ERC721Asset

seller = "0x" + "ab" * 20  # Replace with actual seller address
buyer = "0x" + "cd" * 20   # Replace with actual buyer address

asset = ERC721Asset(address="0x06012c8cf97BEaD5deAe237070F9587f8E7A266d", id=1)


def main():
    sell = encode_sell(ERC721_SCHEMA, asset, seller)
    buy = encode_buy(ERC721_SCHEMA, asset, buyer)
    print("Sell:", sell.to_canonical_json())
    print("Buy:", buy.to_canonical_json())
    print("Match:", calldata_can_match(buy, sell))


if __name__ == "__main__":
    main()
