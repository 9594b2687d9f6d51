"""
Basic seam carving example on a synthetic image.

Shrinks an image (or a generated scene with a sun, a horizon and some
texture) and saves the original, the energy map with the first seams, and
the carved result side by side.

Run:
    python examples/basic_seam_carving.py [--image photo.jpg] [--delta-width 40] [--delta-height 20]

Output goes to output/ directory.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import time

import torch
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from seam_carving import ResizeOrchestrator, load_image, save_image, seam_overlay

OUTPUT_DIR = Path(__file__).parent.parent / "output"


def create_scene(height=120, width=160):
    """Sky over grass with a bright disc: flat regions plus a few strong edges."""
    y = torch.arange(height, dtype=torch.float32).view(-1, 1).expand(height, width)
    x = torch.arange(width, dtype=torch.float32).view(1, -1).expand(height, width)

    image = torch.zeros(3, height, width)
    sky = y < height * 0.6
    image[0] = torch.where(sky, torch.tensor(110.), torch.tensor(40.))
    image[1] = torch.where(sky, torch.tensor(160.), torch.tensor(140.))
    image[2] = torch.where(sky, torch.tensor(230.), torch.tensor(50.))

    sun = (x - width * 0.7) ** 2 + (y - height * 0.3) ** 2 < (height * 0.12) ** 2
    image[:, sun] = torch.tensor([250., 220., 60.]).unsqueeze(1)

    # Grass texture
    torch.manual_seed(42)
    image[1, ~sky] += torch.randint(-20, 20, (int((~sky).sum()),)).float()

    return image.clamp(0, 255).to(torch.uint8)


def to_numpy(t):
    """Convert (3, H, W) uint8 tensor to (H, W, 3) numpy for display."""
    return t.permute(1, 2, 0).cpu().numpy()


def save_comparison(images, titles, filename, suptitle=None):
    """Save a row of images side-by-side."""
    n = len(images)
    fig, axes = plt.subplots(1, n, figsize=(5 * n, 4))
    for ax, img, title in zip(axes, images, titles):
        ax.imshow(img)
        ax.set_title(title, fontsize=11)
        ax.axis('off')
    if suptitle:
        fig.suptitle(suptitle, fontsize=14, fontweight='bold')
    fig.tight_layout()
    fig.savefig(filename, dpi=120)
    plt.close(fig)
    print(f"Saved: {filename}")


def main():
    parser = argparse.ArgumentParser(description="Seam carving walkthrough")
    parser.add_argument('--image', type=Path, default=None,
                        help="Image to carve (default: generated scene)")
    parser.add_argument('--delta-width', type=int, default=40)
    parser.add_argument('--delta-height', type=int, default=20)
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(exist_ok=True)

    image = load_image(args.image) if args.image else create_scene()
    _, H, W = image.shape
    print(f"Image: {W} by {H} pixels")

    overlay = seam_overlay(image)

    print(f"Carving {args.delta_width} columns and {args.delta_height} rows...")
    start = time.perf_counter()
    orchestrator = ResizeOrchestrator(image, args.delta_width, args.delta_height)
    n_total = args.delta_width + args.delta_height
    while orchestrator.remaining_vertical or orchestrator.remaining_horizontal:
        orchestrator.step()
        done = len(orchestrator.history)
        if done % 20 == 0:
            print(f"  Removed {done}/{n_total} seams, size: {tuple(orchestrator.image.shape)}")
    carved = orchestrator.image
    print(f"Done in {(time.perf_counter() - start) * 1000:.0f} ms")

    n_vertical = orchestrator.history.count('vertical')
    print(f"Order: {n_vertical} vertical / {len(orchestrator.history) - n_vertical} horizontal")

    save_image(carved, OUTPUT_DIR / "carved.png")
    save_comparison(
        [to_numpy(image), to_numpy(overlay), to_numpy(carved)],
        ["Original", "Energy + first seams", f"Carved ({carved.shape[2]}x{carved.shape[1]})"],
        OUTPUT_DIR / "seam_carving_comparison.png",
        suptitle="Seam carving",
    )


if __name__ == '__main__':
    main()
