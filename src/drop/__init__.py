"""Ocean drop (package) model: names, versions, licenses, sources and manifests."""
