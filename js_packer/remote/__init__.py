"""js_packer.remote: HTTP fetching of remote scripts and the fetch barrier."""
