from finddupes.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "xxhash": HashAlgorithmName.XXHASH,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Content digest used to confirm duplicates:\n"
    "  sha256     : " + HashAlgorithmName.SHA256.description + "\n"
    "  xxhash     : " + HashAlgorithmName.XXHASH.description + "\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in the current directory
  %(prog)s

  Find duplicates across two trees (files may match across roots)
  %(prog)s ~/Photos /mnt/backup/Photos

  Hide directory/symlink progress lines and hash with 4 workers
  %(prog)s -q -j 4 ~/Downloads

  Faster non-cryptographic digest, report to a file
  %(prog)s --algorithm xxhash ~/Downloads > ~/duplicates.txt

Duplicates are only reported, never deleted.
"""
