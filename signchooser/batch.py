"""Batch signing of every photo in a directory."""

import time
from pathlib import Path
from typing import Dict, Optional

from .config import SignConfig, OUTPUT_PREFIX, OUTPUT_QUALITY
from .drawer import SignDrawer
from .image_io import load_image, save_image


class SignPhotoMgr:
    """Sign all photos of a directory with signs from a library directory."""

    def __init__(
        self,
        photo_path,
        sign_path,
        prefix: str = OUTPUT_PREFIX,
        quality: int = OUTPUT_QUALITY,
        verbose: bool = False,
    ):
        """
        Args:
            photo_path: Directory of photos; outputs are written here too
            sign_path: Directory of sign images
            prefix: Output name prefix, prepended to the photo file name
            quality: Encode quality for JPEG/WebP outputs
            verbose: Print progress messages
        """
        self.set_photo_path(photo_path)
        self.set_sign_path(sign_path)
        self.prefix = prefix
        self.quality = quality
        self.verbose = verbose
        self.drawer = SignDrawer(verbose=verbose)

    def set_photo_path(self, photo_path):
        self.photo_path = Path(photo_path)

    def set_sign_path(self, sign_path):
        self.sign_path = Path(sign_path)

    def output_path(self, photo: Path) -> Path:
        return photo.with_name(f"{self.prefix}{photo.name}")

    def sign_all_photos(self, config: Optional[SignConfig] = None) -> Dict:
        """
        Load the sign library, then sign and save every photo.

        Photos that fail to decode, have no suitable sign or fail to save
        are skipped. Files already carrying the output prefix are not
        signed again.

        Args:
            config: Placement options and compositing flags

        Returns:
            Dict with:
                - 'signed': Number of photos written
                - 'skipped': Number of entries that were not photos or got no sign
                - 'failed': Number of signed photos that could not be saved
                - 'outputs': List of output paths
                - 'timing': Processing times

        Raises:
            FileNotFoundError / NotADirectoryError: photo or sign directory
                cannot be opened
        """
        config = config or SignConfig()
        timing = {}

        if not self.photo_path.exists():
            raise FileNotFoundError(f"Photo directory not found: {self.photo_path}")
        if not self.photo_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.photo_path}")

        t0 = time.time()
        self.drawer.clear_library()
        self.drawer.load_library(self.sign_path)
        timing['library'] = time.time() - t0

        # Snapshot the listing so outputs written below are not picked up
        entries = sorted(p for p in self.photo_path.iterdir() if p.is_file())

        t0 = time.time()
        summary = {'signed': 0, 'skipped': 0, 'failed': 0, 'outputs': []}
        for entry in entries:
            if self.prefix and entry.name.startswith(self.prefix):
                summary['skipped'] += 1
                continue

            status, out_path = self._sign_entry(entry, config)
            summary[status] += 1
            if out_path is not None:
                summary['outputs'].append(out_path)
        timing['photos'] = time.time() - t0

        timing['total'] = sum(timing.values())
        summary['timing'] = timing
        self._log(f"✓ Signed {summary['signed']} of {len(entries)} files in {timing['total']:.2f}s")
        return summary

    def sign_photo_file(self, photo: Path, config: Optional[SignConfig] = None) -> Optional[Path]:
        """
        Sign one photo with the already loaded library and save it.

        Returns:
            Output path, or None if the photo was not signed and saved
        """
        _, out_path = self._sign_entry(Path(photo), config or SignConfig())
        return out_path

    def _sign_entry(self, photo: Path, config: SignConfig):
        image = load_image(photo)
        if image is None:
            self._log(f"  Skipped {photo.name} (not an image)")
            return 'skipped', None

        result = self.drawer.sign_photo(image, config)
        if not result['valid']:
            self._log(f"  Skipped {photo.name}: {result['warnings']}")
            return 'skipped', None

        out_path = self.output_path(photo)
        if not save_image(out_path, result['composite'], quality=self.quality):
            self._log(f"✗ Failed to save {out_path}")
            return 'failed', None

        self._log(f"  {photo.name} -> {out_path.name} ({result['sign']})")
        return 'signed', out_path

    def _log(self, message: str):
        """Print message if verbose."""
        if self.verbose:
            print(message)
