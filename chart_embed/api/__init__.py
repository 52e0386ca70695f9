"""HTTP API for authoring, sharing and serving chart embeds."""
