from __future__ import annotations

from tenant_dashboard.customization.schema import (
    AnalyticsConfig,
    AppConfig,
    ChartConfig,
    ClientConfig,
    DashboardConfig,
    TabConfig,
)

PRIMARY_COLOR = "#3B82F6"
SECONDARY_COLOR = "#93C5FD"

BOOKING_FEATURE = "booking"

custom_config = AppConfig(
    title="Bonjour Investments - Property Management",
    company_name="Bonjour Investments",
    logo="assets/bonjour-logo.png",
    primary_color=PRIMARY_COLOR,
    secondary_color=SECONDARY_COLOR,
    user_name="Fan Zhang",
    dashboard=DashboardConfig(
        tabs=[
            TabConfig(
                id="search",
                label="Property Search",
                description="Find suitable properties",
                icon="🔍",
                feature="propertySearch",
            ),
            TabConfig(
                id="emailTemplate",
                label="Email Template",
                description="Generate supplier emails",
                icon="✉️",
                feature="emailTemplates",
            ),
            TabConfig(
                id="supplierDatabase",
                label="Supplier Database",
                description="Manage supplier information",
                icon="🏠",
                feature="supplierDatabase",
            ),
        ],
        charts={
            "supplierResponseTime": ChartConfig(
                type="bar",
                data_keys=["avgResponseTime"],
                colors=[PRIMARY_COLOR],
                data=[
                    {"supplier": "Maison", "avgResponseTime": 1.5},
                    {"supplier": "Crystal", "avgResponseTime": 2.1},
                    {"supplier": "London Aspect", "avgResponseTime": 1.8},
                ],
                title="Supplier Response Time (hours)",
            ),
            "bookingsByLocation": ChartConfig(
                type="pie",
                data_keys=["value"],
                colors=[PRIMARY_COLOR, SECONDARY_COLOR, "#BFDBFE"],
                data=[
                    {"name": "London", "value": 60},
                    {"name": "Manchester", "value": 25},
                    {"name": "Birmingham", "value": 15},
                ],
                feature=BOOKING_FEATURE,
                title="Bookings by Location (%)",
            ),
        },
    ),
    analytics=AnalyticsConfig(
        charts={
            "monthlyBookings": ChartConfig(
                type="line",
                data_keys=["bookings"],
                colors=[PRIMARY_COLOR],
                data=[
                    {"month": "Jan", "bookings": 45},
                    {"month": "Feb", "bookings": 52},
                    {"month": "Mar", "bookings": 61},
                    {"month": "Apr", "bookings": 58},
                ],
                feature=BOOKING_FEATURE,
            ),
            "averageStayDuration": ChartConfig(
                type="bar",
                data_keys=["avgDays"],
                colors=[SECONDARY_COLOR],
                data=[
                    {"year": "2021", "avgDays": 14},
                    {"year": "2022", "avgDays": 16},
                    {"year": "2023", "avgDays": 18},
                ],
                title="Average Stay Duration (days)",
            ),
        },
    ),
    clients=[
        ClientConfig(id="amazon", name="Amazon", industry="E-commerce"),
        ClientConfig(id="insuranceco", name="InsuranceCo", industry="Insurance"),
    ],
    features={
        "propertySearch": True,
        "emailTemplates": True,
        "supplierDatabase": True,
        BOOKING_FEATURE: True,
        "reporting": True,
    },
)
