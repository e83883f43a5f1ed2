"""Web service around the packer."""
