from __future__ import annotations

from profile_composer.assembler import EntriesContent
from profile_composer.core import ImpactMetric, TimelineEntry

_STACK = (
    "React.js", "TypeScript", "Azure Synapse", "Azure Data Factory", "C#", ".NET",
    "Python", "ARM Templates", "Azure DevOps",
)

_CONMON_DESCRIPTION = (
    "Led the complete migration of legacy Azure ConMon (FedRAMP Continuous Monitoring) to a "
    "modernized compliance web application, processing trillions of records from 25+ data "
    "sources for U.S. government submissions."
)

ENTRIES = (
    TimelineEntry(
        title="Tech Lead - MTAC & ConMon Applications and Serving as Temp PM for ConMon",
        description=(
            "Leading Two projects under C + AI Silver - Mission Apps. MTAC is a critical compliance "
            "application used by US Government to track and manage security compliance of Microsoft "
            "Cloud offerings. ConMon is a FedRAMP Continuous Monitoring application used by US Government "
            "to track and manage security compliance of Microsoft Cloud offerings for Azure and M365. Both "
            "applications process trillions of records from 25+ data sources for U.S. government "
            "submissions and have 6 different stakeholder teams to manage relationship with."
        ),
        timeline_label="April 2025 - Present",
        impact=(
            ImpactMetric("Mentorship", "Grew Teammate's Velocity by 25%", "people"),
            ImpactMetric("Time Saved", "120+ hours/month by delivering high impact features", "swap-horiz"),
            ImpactMetric("3 Jobs in 1", "Tech Lead, IC SWE, Product Manager", "people"),
        ),
        achievements=(
            "Became the Tech Lead for 2 projects - both MTAC & ConMon applications under C + AI Silver - Mission Apps",
            "Serving as Temp Product Manager for ConMon project, coordinating between multiple teams and stakeholders to ensure timely delivery of features and bug fixes",
            "Tutored and mentored engineers on MTAC and ConMon teams, fostering skill development and knowledge sharing",
            "Worked with Stakeholders to swap out existing low impact features with new high impact features cutting 60+ hours per month",
            "Managed a full slate of features, balancing stakeholder priorities, timelines, and emergency requests, and security requirements",
            "Spearheading S360 Security Initiative on ConMon and MTAC",
            "Spearheading Cline AI Initiative on Mission Apps",
            "Serving as Temp Product Manager for ConMon project, coordinating between multiple teams and stakeholders to ensure timely delivery of features and bug fixes",
            "Onboarded Several High Impact Features automating a total estimated 120+ hours per month of manual work for stakeholders",
        ),
        technologies=_STACK,
    ),
    TimelineEntry(
        title="ConMon Tech Lead - Delivering BaselineOS and PhysicalDB Assets Onboarding + Resiliency Feature + More",
        description=_CONMON_DESCRIPTION,
        timeline_label="March 2024 - April 2025",
        impact=(
            ImpactMetric("Time Saved", "120+ hours/month", "speed"),
            ImpactMetric("Performance", "10+ Billion Additional Records Processed Daily", "storage"),
            ImpactMetric("Reliability", "85% Decrease in Incidents", "trending-down"),
        ),
        achievements=(
            "ConMon Tech Lead - managed a full slate of features, balancing stakeholder prioties, timelines, and emergency requests",
            "Onboarded Database and BaselineOS Assets onto ConMon Application, enhancing data comprehensiveness and saving 20+ hours per month",
            "Delivered ConMon Resiliency Feature reducing resolution time from 2 hours to 15 minutes and Achieved 85% reduction in ICMS incidents for ConMon Data Pipelines",
            "Led S360 Security Initiative on ConMon",
            "For specific emergency rollback stakeholder requests, I communicated mutliple solutions and tradeoffs, ultimately delivering a solution that satisfied all parties and fit our timeline",
            "Increased personal velocity by improving own processes and improved context switching, and learned how to use AI tools to improve productivity",
        ),
        technologies=_STACK,
    ),
    TimelineEntry(
        title="M365 ConMon Onboarding",
        description=_CONMON_DESCRIPTION,
        timeline_label="Jan 2024 - March 2024",
        impact=(
            ImpactMetric("Cost Savings", "$10K+/month", "attach-money"),
            ImpactMetric("Time Saved", "40+ hours/month", "speed"),
        ),
        achievements=(
            "Integrated M365 data onto ConMon Application reducing manual effort by 40+ hours per month",
            "Identified and resolved critical data discrepancies between M365 and ConMon datasets, ensuring data integrity and reliability",
            "Collaborated with M365 teams to streamline data ingestion processes, enhancing overall system efficiency",
        ),
        technologies=_STACK,
    ),
    TimelineEntry(
        title="Azure ConMon Modernization",
        description=_CONMON_DESCRIPTION,
        timeline_label="May 2023 - Jan 2024",
        impact=(
            ImpactMetric("Cost Savings", "$25K+/month", "attach-money"),
            ImpactMetric("Time Saved", "120+ hours/month", "speed"),
            ImpactMetric("Performance", "2 Billion Records Processed Daily", "storage"),
            ImpactMetric("Reliability", "90% Decrease in need for manual intervention compared to Legacy System", "trending-down"),
            ImpactMetric("Speed", "10hrs => 2.5hrs Pipeline RunTime", "trending-down"),
        ),
        achievements=(
            "Led development of data pipelines and ETL processes using Azure Synapse to aggregate and process data from 25+ sources",
            "Created a Roadmap of required data processing and ingestion tasks to onboard Azure data onto ConMon Application",
            "Created over 100 dataflows and 30+ pipelines to automate data ingestion, transformation, and loading on a daily basis",
            "Mapped required inputs and outputs of several data processes to figure out how to create POA&Ms more efficiently",
            "Proposed and Delivered Independently effort to reduce overall pipeline runtime from 10hrs long to 2.5hrs in length",
        ),
        technologies=_STACK,
    ),
    TimelineEntry(
        title="Microsoft Personnel Systems",
        description=(
            "Enhanced and optimized critical personnel management systems for Microsoft's government "
            "sector, focusing on security compliance and performance improvements."
        ),
        timeline_label="November 2021 - May 2023",
        impact=(),
        achievements=(
            "Optimized rendering performance reducing unnecessary re-renders by 95% for multiple personnel user interfaces",
            "Worked on the Personnel Project to deliver features for new dynamic Government Forms page",
            "Delivered Security Clearance Management features for Personnel application",
        ),
        technologies=("React.js", "TypeScript", "C#", "Arm Templates", "Azure DevOps"),
    ),
)

CONTENT = EntriesContent(
    title="Microsoft Timeline + Projects",
    subtitle="Showcasing my key achievements and innovations at Microsoft November 2021 - Present",
    entries=ENTRIES,
)
