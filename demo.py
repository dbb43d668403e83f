"""
Binary Search Tree Demo — Reference scenarios, tree shapes, and skew analysis.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from binary_search_tree import BinarySearchTree

SEED = 42
MAX_KEYS = 1500
STEP = 100
N_DUPLICATES = 200

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def build_tree(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def node_positions(tree):
    """(in-order rank, depth, label) for every node, plus parent-child edges."""
    positions = {}
    edges = []
    stack = []
    node = tree.root
    depth = 0
    rank = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        node, depth = stack.pop()
        positions[id(node)] = (rank, -depth, str(node.data))
        rank += 1
        if node.parent is not None:
            edges.append((id(node.parent), id(node)))
        node = node.right
        depth += 1
    return positions, edges


def draw_tree(ax, tree, title):
    positions, edges = node_positions(tree)
    for parent_id, child_id in edges:
        x0, y0, _ = positions[parent_id]
        x1, y1, _ = positions[child_id]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.5, zorder=1)
    for x, y, label in positions.values():
        ax.scatter([x], [y], s=900, color="steelblue", zorder=2)
        ax.text(x, y, label, ha="center", va="center", fontsize=7, color="white", zorder=3)
    ax.set_title(title)
    ax.set_xlabel("In-order rank")
    ax.set_ylabel("Depth")
    ax.margins(0.2)
    ax.grid(True, alpha=0.3)


def example_1_reference_scenarios():
    """Run the three reference checks and draw each resulting tree."""
    print("=" * 60)
    print("Example 1: Reference Scenarios")
    print("=" * 60)

    balanced = build_tree([20, 10, 30, 5, 15, 25, 35])
    balanced_ok = (
        balanced.size() == 7
        and all(balanced.contains(v) for v in [20, 5, 35, 15])
        and not balanced.contains(99)
    )

    skewed = build_tree(["Badgers", "Brewers", "Bucks", "Packers"])
    skewed_ok = (
        skewed.size() == 4
        and skewed.root.data == "Badgers"
        and skewed.root.right.data == "Brewers"
        and skewed.root.right.right.data == "Bucks"
        and not skewed.contains("Bears")
    )

    duplicates = build_tree([100, 50, 150, 50])
    duplicates_ok = (
        duplicates.size() == 4
        and duplicates.root.left.data == 50
        and duplicates.root.left.left.data == 50
        and duplicates.to_in_order_string() == "[ 50, 50, 100, 150 ]"
    )

    print(f"Test1 (Integer, Balanced tree): {'PASSED' if balanced_ok else 'FAILED'}")
    print(f"Test2 (String, Right-skewed tree): {'PASSED' if skewed_ok else 'FAILED'}")
    print(f"Test3 (Integer, Duplicate Left tree): {'PASSED' if duplicates_ok else 'FAILED'}")
    print(f"Duplicate tree in-order: {duplicates.to_in_order_string()}")

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    draw_tree(axes[0], balanced, "Balanced integers")
    draw_tree(axes[1], skewed, "Right-skewed strings")
    draw_tree(axes[2], duplicates, "Duplicates go left")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_scenarios.png", dpi=150)
    plt.close(fig)

    balanced.clear()
    print(f"After clear: is_empty={balanced.is_empty()}, size={balanced.size()}")

    return fig, (balanced_ok, skewed_ok, duplicates_ok)


def example_2_height_vs_order():
    """Height growth for sorted versus shuffled insertion order."""
    print("\n" + "=" * 60)
    print("Example 2: Height vs Insertion Order")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = np.arange(STEP, MAX_KEYS + 1, STEP)
    sorted_heights = []
    shuffled_heights = []

    for n in sizes:
        sorted_heights.append(build_tree(range(n)).height())
        shuffled_heights.append(build_tree(rng.permutation(n).tolist()).height())

    print(f"{'Keys':<10} {'Sorted':<10} {'Shuffled':<10} {'log2(n)':<10}")
    print("-" * 40)
    for n, h_sorted, h_shuffled in zip(sizes, sorted_heights, shuffled_heights):
        print(f"{n:<10} {h_sorted:<10} {h_shuffled:<10} {np.log2(n):<10.2f}")
    print(f"\nRecursion limit: {sys.getrecursionlimit()} (sorted tree reached depth {sorted_heights[-1]})")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(sizes, sorted_heights, "o-", color="#e74c3c", linewidth=2, label="Sorted input")
    axes[0].plot(sizes, shuffled_heights, "o-", color="#27ae60", linewidth=2, label="Shuffled input")
    axes[0].set_xlabel("Number of keys")
    axes[0].set_ylabel("Tree height")
    axes[0].set_title("Height Growth")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, shuffled_heights, "o-", color="#27ae60", linewidth=2, label="Shuffled input")
    axes[1].plot(sizes, np.log2(sizes), "k--", linewidth=2, label="log2(n)")
    axes[1].set_xlabel("Number of keys")
    axes[1].set_ylabel("Tree height")
    axes[1].set_title("Shuffled Input (Zoomed)")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height.png", dpi=150)
    plt.close(fig)

    return fig, (sizes, sorted_heights, shuffled_heights)


def example_3_duplicate_placement():
    """Where repeated keys land when only a few distinct values exist."""
    print("\n" + "=" * 60)
    print("Example 3: Duplicate Placement")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    values = rng.integers(0, 10, size=N_DUPLICATES).tolist()
    tree = build_tree(values)

    left_steps = 0
    right_steps = 0
    stack = [tree.root]
    while stack:
        node = stack.pop()
        if node.left is not None:
            left_steps += 1
            stack.append(node.left)
        if node.right is not None:
            right_steps += 1
            stack.append(node.right)

    print(f"Inserted {len(values)} values with {len(set(values))} distinct keys")
    print(f"Size: {tree.size()}, height: {tree.height()}")
    print(f"Left links: {left_steps}, right links: {right_steps}")
    print(f"In-order sorted: {tree.in_order() == sorted(values)}")

    keys, counts = np.unique(values, return_counts=True)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].bar(keys, counts, color="steelblue")
    axes[0].set_xlabel("Key")
    axes[0].set_ylabel("Occurrences")
    axes[0].set_title("Inserted Key Frequencies")
    axes[0].set_xticks(keys)
    axes[0].grid(True, alpha=0.3, axis="y")

    axes[1].bar(["Left links", "Right links"], [left_steps, right_steps], color=["#3498db", "#f39c12"])
    axes[1].set_ylabel("Count")
    axes[1].set_title("Duplicates Lean Left")
    axes[1].grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_duplicates.png", dpi=150)
    plt.close(fig)

    return fig, tree


def generate_pdf_report(figures_data):
    pdf_path = Path(__file__).parent / "report.pdf"
    image_files = sorted(VIZ_DIR.glob("0*.png"))

    with PdfPages(pdf_path) as pdf:
        for (title, _), img_file in zip(figures_data, image_files):
            fig_copy = plt.figure(figsize=(11, 8.5))
            fig_copy.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig_copy.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(img_file))
            ax.axis("off")
            pdf.savefig(fig_copy)
            plt.close(fig_copy)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 19 + "BINARY SEARCH TREE DEMO" + " " * 16 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    figures = []

    fig1, _ = example_1_reference_scenarios()
    figures.append(("Example 1: Reference Scenarios", fig1))

    fig2, _ = example_2_height_vs_order()
    figures.append(("Example 2: Height vs Insertion Order", fig2))

    fig3, _ = example_3_duplicate_placement()
    figures.append(("Example 3: Duplicate Placement", fig3))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
