from __future__ import annotations

from profile_composer.assembler import EntriesContent
from profile_composer.core import ImpactMetric, Project

_STACK = (
    "React.js", "TypeScript", "Azure Synapse", "Azure Data Factory", "C#", ".NET",
    "Python", "ARM Templates", "Azure DevOps",
)

PROJECTS = (
    Project(
        title="Azure ConMon Modernization",
        description=(
            "Led the complete migration of legacy Azure ConMon (FedRAMP Continuous Monitoring) to a "
            "modernized compliance web application, processing trillions of records from 25+ data "
            "sources for U.S. government submissions."
        ),
        impact=(
            ImpactMetric("Cost Savings", "$25K+/month", "attach-money"),
            ImpactMetric("Time Saved", "120+ hours/month", "speed"),
            ImpactMetric("Performance", "95% improvement", "trending-up"),
            ImpactMetric("Reliability", "85% Decrease in Incidents", "trending-down"),
        ),
        achievements=(
            "Tutored and mentored engineers on MTAC and ConMon teams, fostering skill development and knowledge sharing",
            "Integrated M365 data onto ConMon Application reducing manual effort by 40+ hours per month",
            "Onboarded Database and BaselineOS Assets onto ConMon Application, enhancing data comprehensiveness and saving 40+ hours per month",
            "Worked with Stakeholders to create high impact features streamlining POAM report preparation and cutting 60+ hours per month",
            "Delivered ConMon Resiliency Feature reducing resolution time from 2 hours to 15 minutes and Achieved 85% reduction in ICMS incidents for ConMon Data Pipelines",
            "Spearheading S360 Security Initiative on ConMon",
            "Spearheading Cline AI Initiative on Mission Apps",
        ),
        technologies=_STACK,
    ),
    Project(
        title="Microsoft Personnel Systems",
        description=(
            "Enhanced and optimized critical personnel management systems for Microsoft's government "
            "sector, focusing on security compliance and performance improvements."
        ),
        impact=(),
        achievements=(
            "Led migration of legacy Azure ConMon (FedRAMP Continuous Monitoring) to modernized web application across multiple clouds",
            "Reduced monthly operational costs by $25,000+ through system modernization and optimization",
            "Streamlined POAM report preparation, cutting 120+ hours per month for U.S. government submissions",
            "Optimized rendering performance reducing unnecessary re-renders by 95%",
            "Worked on Personnel Project to build internal Microsoft employee management system for government contractors",
            "Delivered Features for Government Dynamic Forms and Security Clearance Management",
        ),
        technologies=("React.js", "TypeScript", "C#", "Arm Templates", "Azure DevOps"),
    ),
)

CONTENT = EntriesContent(
    title="Microsoft Projects",
    subtitle="Showcasing key achievements and innovations at Microsoft's C + AI Silver - Azure Gov Tooling",
    entries=PROJECTS,
)
