"""English vocabulary and grammar trainer with spaced repetition."""
