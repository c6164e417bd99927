"""Payment gateway configuration and policy for the donation backend."""
