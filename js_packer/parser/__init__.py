"""js_packer.parser: HTML document seam and <script> classification."""
