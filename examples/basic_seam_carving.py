"""
Basic seam carving example.

Shows the energy map and the first seam of an image, then narrows it
with both energy models so the results can be compared side by side.

Run:
    python examples/basic_seam_carving.py photo.jpg 30

Output goes to output/ directory.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from seamcarve.image import OpenImage
from seamcarve.seam import find_seam
from seamcarve.visualize import draw_seam, save_energy_map

OUTPUT_DIR = Path(__file__).parent.parent / "output"


def to_numpy(raster):
    return raster.permute(1, 2, 0).cpu().numpy()


def main():
    if len(sys.argv) != 3:
        print(f"Usage: {sys.argv[0]} IMAGE PERCENT")
        sys.exit(1)
    path, percent = sys.argv[1], int(sys.argv[2])
    OUTPUT_DIR.mkdir(exist_ok=True)

    print("Loading image...")
    original = OpenImage.from_file(path)
    print(f"Image size: {original.dims[0]} x {original.dims[1]}")

    print("Computing energy...")
    energy = original.compute_energy()
    save_energy_map(energy, OUTPUT_DIR / "energy.png")

    seam = find_seam(original.cumulative)
    OpenImage(draw_seam(original.raster, seam)).save(OUTPUT_DIR / "first_seam.png")

    results = {}
    for model in ('sobel', 'dual_gradient'):
        print(f"Carving {percent}% with {model} energy...")
        opened = OpenImage(original.raster)
        result = opened.reduce(percent, energy=model)
        print(f"  Removed {result.removed} seams, size: {opened.dims}")
        opened.save(OUTPUT_DIR / f"carved_{model}.png")
        results[model] = opened.raster

    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    panels = [('original', original.raster)] + list(results.items())
    for ax, (title, raster) in zip(axes, panels):
        ax.imshow(to_numpy(raster))
        ax.set_title(title, fontsize=11)
        ax.axis('off')
    plt.tight_layout()
    plt.savefig(OUTPUT_DIR / "comparison.png", dpi=150, bbox_inches='tight')
    plt.close()

    print("\nDone! Check the output/ directory for results.")


if __name__ == '__main__':
    main()
