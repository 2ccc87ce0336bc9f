"""Shared configuration, logging and database models for the site builder."""
