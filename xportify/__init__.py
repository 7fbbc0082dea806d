"""Generate the package.json exports field from compiled build output."""
