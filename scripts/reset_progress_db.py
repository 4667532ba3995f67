"""
Reset the progress database.

DANGEROUS: This deletes all review history, daily stats and streaks!
Card and rule review state in MongoDB is not touched.

Usage:
    python -m scripts.reset_progress_db
"""

from srs_trainer import persistence


def main():
    print("=" * 60)
    print("WARNING: Reset Progress Database")
    print("=" * 60)
    print()
    print("This will DELETE all progress data:")
    print("  - All review events (logs of past reviews)")
    print("  - All daily stats and the learner profile")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        persistence.reset_db()
        print("✓ Database reset complete!")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
