"""
Reset the review state of every vocabulary entry.

DANGEROUS: This deletes all review history!
Entries go back to "unknown", never reviewed. Excluded entries are kept as is.

Usage:
    python -m scripts.maintenance.reset_review_state
"""

from core import lexicon_repo


def main():
    print("=" * 60)
    print("WARNING: Reset Review State")
    print("=" * 60)
    print()
    print(f"Database: {lexicon_repo.get_db_name()}")
    print("This will DELETE all review history:")
    print("  - Status of every non-excluded word (back to 'unknown')")
    print("  - Last / next review times and review counts")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting review state...")
        modified = lexicon_repo.reset_review_state()
        print(f"✓ Reset complete! {modified} entries modified.")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
