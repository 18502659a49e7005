from __future__ import annotations

from checkers.main import main


if __name__ == "__main__":
	main()
