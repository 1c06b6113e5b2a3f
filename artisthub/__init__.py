"""ArtistHub API: artist profiles, casting jobs and account management."""
