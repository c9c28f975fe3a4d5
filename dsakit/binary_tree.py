"""Binary trees with Morris (constant-space) traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _predecessor(node: TreeNode) -> TreeNode:
    """Return the rightmost node of ``node``'s left subtree, stopping at a thread."""
    predecessor = node.left
    assert predecessor is not None
    while predecessor.right is not None and predecessor.right is not node:
        predecessor = predecessor.right
    return predecessor


def morris_inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the in-order values using threaded links instead of a stack."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = _predecessor(current)
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.value)
            current = current.right
    return result


def morris_preorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the pre-order values using threaded links instead of a stack."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = _predecessor(current)
        if predecessor.right is None:
            result.append(current.value)
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            current = current.right
    return result


def regular_inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the in-order values by plain recursion."""
    if root is None:
        return []
    return [
        *regular_inorder_traversal(root.left),
        root.value,
        *regular_inorder_traversal(root.right),
    ]


def build_example_tree() -> TreeNode:
    """Build the tree 1(2(4, 5), 3(-, 6))."""
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5)),
        TreeNode(3, None, TreeNode(6)),
    )


def build_complex_tree() -> TreeNode:
    """Build the tree 1(2(4(8, 9), 5), 3(6, 7))."""
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4, TreeNode(8), TreeNode(9)), TreeNode(5)),
        TreeNode(3, TreeNode(6), TreeNode(7)),
    )


def format_tree(root: TreeNode | None) -> str:
    """Render the tree level by level, writing ``null`` for each missing child."""
    if root is None:
        return "[]"
    parts: list[str] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append("null")
        else:
            parts.append(str(node.value))
            queue.append(node.left)
            queue.append(node.right)
    return "[" + " ".join(parts) + "]"


def _show_traversals(root: TreeNode) -> None:
    print("\nTraversal Results:")
    print("Morris Inorder:", morris_inorder_traversal(root))
    print("Regular Inorder:", regular_inorder_traversal(root))
    print("Morris Preorder:", morris_preorder_traversal(root))


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of Morris traversal."""
    print("=== Morris Traversal Algorithm Demonstrations ===\n")

    print("Example 1: Simple Binary Tree")
    print("Tree structure:")
    print("      1")
    print("     / \\")
    print("    2   3")
    print("   / \\   \\")
    print("  4   5   6")
    tree = build_example_tree()
    print("\nTree representation:", format_tree(tree))
    _show_traversals(tree)

    print("\nExample 2: Complex Binary Tree")
    print("Tree structure:")
    print("         1")
    print("       /   \\")
    print("      2     3")
    print("     / \\   / \\")
    print("    4   5 6   7")
    print("   / \\")
    print("  8   9")
    complex_tree = build_complex_tree()
    print("\nTree representation:", format_tree(complex_tree))
    _show_traversals(complex_tree)

    print("\nExample 3: Understanding Morris Traversal")
    print("Step-by-step process for inorder traversal:")
    print("1. Start at root (1)")
    print("2. For each node:")
    print("   a. If no left child: visit node and go right")
    print("   b. If has left child:")
    print("      - Find predecessor (rightmost node in left subtree)")
    print("      - If predecessor's right is null:")
    print("        * Create temporary link to current")
    print("        * Go to left child")
    print("      - If predecessor's right points to current:")
    print("        * Remove temporary link")
    print("        * Visit current node")
    print("        * Go to right child")

    print("\nAdvantages of Morris Traversal:")
    print("1. O(1) space complexity - no recursion or stack")
    print("2. Preserves original tree structure")
    print("3. Useful for memory-constrained systems")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())