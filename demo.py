import logging
import os

from orderstat import OrderStatisticTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

DEMO_KEYS = [5, 7, 6, 3, 8, 4, 2]


def build_tree(keys: list[int]) -> OrderStatisticTree:
    tree = OrderStatisticTree(validate_on_write=True)
    for key in keys:
        tree.put(key, "")
    return tree


def report(tree: OrderStatisticTree) -> None:
    logger.info(f"Size of tree: {tree.size()}")
    logger.info(f"Level order: {list(tree.level_order())}")

    logger.info(f"Min: {tree.min()}")
    logger.info(f"Max: {tree.max()}")

    for floor_key, ceil_key in [(1, 1), (7, 4), (9, 9)]:
        logger.info(
            f"floor({floor_key}): {tree.floor(floor_key)}, "
            f"ceil({ceil_key}): {tree.ceil(ceil_key)}"
        )

    for key in [6, 1, 2, 3]:
        logger.info(f"Rank({key}): {tree.rank(key)}")

    for i in range(tree.size() + 2):
        logger.info(f"Select({i}): {tree.select(i)}")


def main():
    logger.info(f"Size of empty tree: {build_tree([]).size()}")

    tree = build_tree(DEMO_KEYS)
    report(tree)

    for key in [2, 5]:
        tree.delete(key)
        logger.info(f"Deleting {key}... level order: {list(tree.level_order())}")


if __name__ == "__main__":
    main()
