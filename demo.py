"""
Binary Search Tree Demo -- structural equality between trees.

Builds three trees and prints whether they compare equal. Equality is by
shape and values, so only trees built from the same insertion sequence
match.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_search_tree import BinarySearchTree


def main():
    bst1 = BinarySearchTree([1, 3, 5, 9, 10, 23, 99])
    bst2 = BinarySearchTree([3, 9, 22, 99, 3, 0, 11, 32])
    bst3 = BinarySearchTree([3, 9, 22, 99, 3, 0, 11, 32])

    print(bst1 == bst2)
    print(bst2 == bst3)


if __name__ == "__main__":
    main()
