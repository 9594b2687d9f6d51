"""
Batch content-aware resizing from the command line.

For every input image writes <stem>_resized.png and, unless disabled, the
diagnostic <stem>_energy.png and <stem>_seams.png next to it in the output
directory. Any failure on one image is reported and recorded; the rest are still processed.

Run:
    seam-carve photo1.jpg photo2.jpg --delta-width 50 --delta-height 20 -o output/
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .carving import ResizeOrchestrator
from .energy import gradient_magnitude_energy
from .image_io import load_image, save_image
from .visualize import energy_to_image, seam_overlay

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of resizing one input file."""
    path: Path
    output_path: Optional[Path] = None
    error: Optional[Exception] = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


def carve_file(path: Path, output_dir: Path, delta_width: int, delta_height: int,
               diagnostics: bool = True) -> Path:
    """Resize a single image file and return the path of the resized output."""
    image = load_image(path)
    _, H, W = image.shape
    print(f"{path.name}: {W} by {H} pixels")

    # Validate before writing anything for this image
    orchestrator = ResizeOrchestrator(image, delta_width, delta_height)

    if diagnostics:
        save_image(energy_to_image(gradient_magnitude_energy(image)),
                   output_dir / f"{path.stem}_energy.png")
        save_image(seam_overlay(image), output_dir / f"{path.stem}_seams.png")

    carved = orchestrator.run()
    print("Carving: " + ''.join('V' if d == 'vertical' else 'H' for d in orchestrator.history))

    output_path = output_dir / f"{path.stem}_resized.png"
    save_image(carved, output_path)
    return output_path


def carve_batch(paths: Iterable[Path], output_dir: Path, delta_width: int,
                delta_height: int, diagnostics: bool = True) -> List[BatchResult]:
    """Resize every file in ``paths``, isolating failures per file."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    results = []
    for path in paths:
        path = Path(path)
        result = BatchResult(path=path)
        start = time.perf_counter()
        try:
            result.output_path = carve_file(path, output_dir, delta_width,
                                            delta_height, diagnostics)
        except Exception as e:  # noqa: BLE001
            result.error = e
            logger.debug("Failed to carve %s", path, exc_info=True)
            print(f"Error: {path}: {e}", file=sys.stderr)
        result.elapsed_ms = (time.perf_counter() - start) * 1000.0

        if result.ok:
            print(f"Process successfully completed for {path.name} in {result.elapsed_ms:.0f} ms\n")
        results.append(result)

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shrink images by seam carving (content-aware resizing).")
    parser.add_argument('inputs', nargs='+', type=Path,
                        help="Image files to resize")
    parser.add_argument('--delta-width', '-dw', type=int, default=0,
                        help="Number of columns to remove (default: 0)")
    parser.add_argument('--delta-height', '-dh', type=int, default=0,
                        help="Number of rows to remove (default: 0)")
    parser.add_argument('--output-dir', '-o', type=Path, default=Path('.'),
                        help="Directory for resized and diagnostic images (default: .)")
    parser.add_argument('--no-diagnostics', action='store_true',
                        help="Skip the energy map and seam overlay images")
    parser.add_argument('--verbose', '-v', action='store_true',
                        help="Log every removed seam")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    results = carve_batch(args.inputs, args.output_dir, args.delta_width,
                          args.delta_height, diagnostics=not args.no_diagnostics)

    failed = [r for r in results if not r.ok]
    print(f"Resized {len(results) - len(failed)}/{len(results)} images into {args.output_dir}")
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
