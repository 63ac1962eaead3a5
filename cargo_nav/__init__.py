"""cargo-nav - open crate links from the terminal."""
