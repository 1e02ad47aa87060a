"""
Use Cases

Organized into domain folders:
- auth/: Session resolution, local login, OAuth callback
- invitations/: Invitation lifecycle
- users/: User management and upsert
- leads/: Lead management
- call_logs/: Call logging
- dashboard/: KPIs
- appointments/: Booked meetings with leads
- lists/: Lead lists
- campaigns/: Campaigns
"""
