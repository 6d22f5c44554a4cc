"""Talk index and talk pages for a personal site."""
