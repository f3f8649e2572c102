# src/csrd_xbrl/domain/services/esrs_taxonomy.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""ESRS taxonomy concept registry.

Purpose:
    Map the concept keys used by the calculation modules to their definitions
    in the EFRAG ESRS XBRL taxonomy (entry point
    https://xbrl.efrag.org/taxonomy/esrs/2023-12-22/esrs_all.xsd). Each
    definition carries the qualified concept name, the Unit Type Registry
    unit (if any), and the period type declared by the taxonomy.

Layer:
    domain/services

Notes:
    - This module is pure domain logic:
        * No logging.
        * No I/O or dynamic taxonomy downloads.
    - Only the subset of concepts actually reported is modelled.
    - The registry is built once at import time and exposed read-only.
    - The six GHG emission concepts are mandatory disclosure lines and are
      always emitted; every other concept is emitted only when a module
      produced a fact for it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Final

from csrd_xbrl.domain.entities.esrs_concept import ConceptDefinition
from csrd_xbrl.domain.enums.esrs import PeriodType
from csrd_xbrl.domain.exceptions.csrd import UnknownConceptError

ESRS_NAMESPACE: Final[str] = "https://xbrl.efrag.org/taxonomy/esrs/2023-12-22"
ESRS_PREFIX: Final[str] = "esrs"

# --------------------------------------------------------------------------- #
# Registry                                                                    #
# --------------------------------------------------------------------------- #

_ESRS_CONCEPTS: dict[str, ConceptDefinition] = {
    # ------------------------------------------------------------------ #
    # E1-6 Gross scope 1, 2, 3 and total GHG emissions                   #
    # ------------------------------------------------------------------ #
    "scope1": ConceptDefinition(
        qname="esrs:GrossScope1GreenhouseGasEmissions",
        unit_id="tCO2e",
        period_type=PeriodType.DURATION,
    ),
    "scope2LocationBased": ConceptDefinition(
        qname="esrs:GrossLocationBasedScope2GreenhouseGasEmissions",
        unit_id="tCO2e",
        period_type=PeriodType.DURATION,
    ),
    "scope2MarketBased": ConceptDefinition(
        qname="esrs:GrossMarketBasedScope2GreenhouseGasEmissions",
        unit_id="tCO2e",
        period_type=PeriodType.DURATION,
    ),
    "scope3": ConceptDefinition(
        qname="esrs:GrossScope3GreenhouseGasEmissions",
        unit_id="tCO2e",
        period_type=PeriodType.DURATION,
    ),
    "totalLocationBased": ConceptDefinition(
        qname="esrs:LocationBasedGreenhouseGasEmissions",
        unit_id="tCO2e",
        period_type=PeriodType.DURATION,
    ),
    "totalMarketBased": ConceptDefinition(
        qname="esrs:MarketBasedGreenhouseGasEmissions",
        unit_id="tCO2e",
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # E1 Climate change                                                  #
    # ------------------------------------------------------------------ #
    "E1ScenariosDiverseRange": ConceptDefinition(
        qname="esrs:DiverseRangeOfClimateScenariosHaveBeenConsideredToDetectRelevantEnvironmentalSocietalTechnologyMarketAndPolicyrelatedDevelopmentsAndDetermineDecarbonisationLevers",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1ScenariosNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfHowDiverseRangeOfClimateScenariosHaveBeenConsideredToDetectRelevantEnvironmentalSocietalTechnologyMarketAndPolicyrelatedDevelopmentsAndDetermineDecarbonisationLeversExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1CarbonPriceAmount": ConceptDefinition(
        qname="esrs:CarbonPriceAppliedForEachMetricTonneOfGreenhouseGasEmission",
        unit_id="DKK",
        period_type=PeriodType.DURATION,
    ),
    "E1CarbonPriceAlignment": ConceptDefinition(
        qname="esrs:CarbonPriceUsedInInternalCarbonPricingSchemeIsConsistentWithCarbonPriceUsedInFinancialStatements",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1CarbonPriceNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfCriticalAssumptionsMadeToDetermineCarbonPriceAppliedExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1IntensityLocationBasedPerNetRevenue": ConceptDefinition(
        qname="esrs:GHGEmissionsIntensityLocationbasedTotalGHGEmissionsPerNetRevenue",
        unit_id="Emissions_per_Monetary",
        period_type=PeriodType.DURATION,
    ),
    "E1IntensityMarketBasedPerNetRevenue": ConceptDefinition(
        qname="esrs:GHGEmissionsIntensityMarketbasedTotalGHGEmissionsPerNetRevenue",
        unit_id="Emissions_per_Monetary",
        period_type=PeriodType.DURATION,
    ),
    "E1TargetsPresent": ConceptDefinition(
        qname="esrs:GHGEmissionsReductionTargetsAndOrAnyOtherTargetsHaveBeenSetToManageMaterialClimaterelatedImpactsRisksAndOpportunities",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1TargetsNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfHowGHGEmissionsReductionTargetsAndOrAnyOtherTargetsHaveBeenSetToManageMaterialClimaterelatedImpactsRisksAndOpportunitiesExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1TargetsTable": ConceptDefinition(
        qname="esrs:TargetsRelatedToClimateChangeMitigationAndAdaptationGHGEmissionsReductionTargetsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyConsumptionTotalKwh": ConceptDefinition(
        qname="esrs:EnergyConsumptionRelatedToOwnOperations",
        unit_id="kWh",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyConsumptionRenewableKwh": ConceptDefinition(
        qname="esrs:EnergyConsumptionFromRenewableSources",
        unit_id="kWh",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyConsumptionNonRenewableKwh": ConceptDefinition(
        qname="esrs:EnergyConsumptionFromFossilSources",
        unit_id="kWh",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyRenewableSharePercent": ConceptDefinition(
        qname="esrs:PercentageOfRenewableSourcesInTotalEnergyConsumption",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyNonRenewableSharePercent": ConceptDefinition(
        qname="esrs:PercentageOfFossilSourcesInTotalEnergyConsumption",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyRenewableProductionKwh": ConceptDefinition(
        qname="esrs:RenewableEnergyProduction",
        unit_id="kWh",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyNonRenewableProductionKwh": ConceptDefinition(
        qname="esrs:NonrenewableEnergyProduction",
        unit_id="kWh",
        period_type=PeriodType.DURATION,
    ),
    "E1EnergyMixTable": ConceptDefinition(
        qname="esrs:DisclosureOfEnergyConsumptionAndMixTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1RiskPhysicalAssets": ConceptDefinition(
        qname="esrs:CarryingAmountOfAssetsAtMaterialPhysicalRisk",
        unit_id="DKK",
        period_type=PeriodType.INSTANT,
    ),
    "E1RiskPhysicalRevenue": ConceptDefinition(
        qname="esrs:NetRevenueAtMaterialPhysicalRisk",
        unit_id="DKK",
        period_type=PeriodType.DURATION,
    ),
    "E1RiskTransitionAssets": ConceptDefinition(
        qname="esrs:CarryingAmountOfAssetsAtMaterialTransitionRisk",
        unit_id="DKK",
        period_type=PeriodType.INSTANT,
    ),
    "E1RiskTransitionRevenue": ConceptDefinition(
        qname="esrs:NetRevenueAtMaterialTransitionRisk",
        unit_id="DKK",
        period_type=PeriodType.DURATION,
    ),
    "E1RiskNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfLocationOfSignificantAssetsAtMaterialPhysicalRiskExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1DecarbonisationLeverTypes": ConceptDefinition(
        qname="esrs:DecarbonisationLeverTypes",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1DecarbonisationNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfExpectedDecarbonisationLeversAndTheirOverallQuantitativeContributionsToAchieveGHGEmissionReductionTargetExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "E1DecarbonisationTable": ConceptDefinition(
        qname="esrs:TargetsRelatedToClimateChangeMitigationAndAdaptationGHGEmissionsReductionTargetsByDecarbonisationLeversTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # E2 Water and marine resources                                      #
    # ------------------------------------------------------------------ #
    "E2TotalWaterWithdrawalM3": ConceptDefinition(
        qname="esrs:E2TotalWaterWithdrawalVolume",
        unit_id="m3",
        period_type=PeriodType.DURATION,
    ),
    "E2WaterWithdrawalInStressRegionsM3": ConceptDefinition(
        qname="esrs:E2WaterWithdrawalInWaterStressAreas",
        unit_id="m3",
        period_type=PeriodType.DURATION,
    ),
    "E2WaterDischargeM3": ConceptDefinition(
        qname="esrs:E2TotalWaterDischargeVolume",
        unit_id="m3",
        period_type=PeriodType.DURATION,
    ),
    "E2WaterReusePercent": ConceptDefinition(
        qname="esrs:E2WaterReusePercentage",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E2WaterStressSharePercent": ConceptDefinition(
        qname="esrs:E2ShareOfWaterWithdrawalInStressAreas",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E2WaterDischargeRatioPercent": ConceptDefinition(
        qname="esrs:E2WaterDischargeRatio",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E2WaterDataQualityPercent": ConceptDefinition(
        qname="esrs:E2WaterDataCoveragePercentage",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # E3 Pollution                                                       #
    # ------------------------------------------------------------------ #
    "E3AirEmissionsTonnes": ConceptDefinition(
        qname="esrs:E3AirEmissions",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E3AirLimitTonnes": ConceptDefinition(
        qname="esrs:E3AirEmissionLimit",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E3AirExceedPercent": ConceptDefinition(
        qname="esrs:E3AirEmissionExceedancePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E3WaterEmissionsTonnes": ConceptDefinition(
        qname="esrs:E3WaterDischarges",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E3WaterLimitTonnes": ConceptDefinition(
        qname="esrs:E3WaterDischargeLimit",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E3WaterExceedPercent": ConceptDefinition(
        qname="esrs:E3WaterDischargeExceedancePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E3SoilEmissionsTonnes": ConceptDefinition(
        qname="esrs:E3SoilEmissions",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E3SoilLimitTonnes": ConceptDefinition(
        qname="esrs:E3SoilEmissionLimit",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E3SoilExceedPercent": ConceptDefinition(
        qname="esrs:E3SoilEmissionExceedancePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E3ReportableIncidentsCount": ConceptDefinition(
        qname="esrs:E3ReportablePollutionIncidents",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "E3DocumentationQualityPercent": ConceptDefinition(
        qname="esrs:E3PollutionDataQualityPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E3MediumsTable": ConceptDefinition(
        qname="esrs:E3PollutionMediumBreakdownTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # E4 Biodiversity and ecosystems                                     #
    # ------------------------------------------------------------------ #
    "E4SitesInProtectedAreasCount": ConceptDefinition(
        qname="esrs:E4SitesInProtectedAreas",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "E4ProtectedAreaHectares": ConceptDefinition(
        qname="esrs:E4AffectedHabitatArea",
        unit_id="hectare",
        period_type=PeriodType.DURATION,
    ),
    "E4RestorationHectares": ConceptDefinition(
        qname="esrs:E4RestoredHabitatArea",
        unit_id="hectare",
        period_type=PeriodType.DURATION,
    ),
    "E4SignificantIncidentsCount": ConceptDefinition(
        qname="esrs:E4SignificantBiodiversityIncidents",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "E4RestorationRatioPercent": ConceptDefinition(
        qname="esrs:E4RestorationCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E4DocumentationQualityPercent": ConceptDefinition(
        qname="esrs:E4DocumentationQualityPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # E5 Resource use and circular economy                               #
    # ------------------------------------------------------------------ #
    "E5PrimaryMaterialConsumptionTonnes": ConceptDefinition(
        qname="esrs:E5PrimaryMaterialConsumption",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E5SecondaryMaterialConsumptionTonnes": ConceptDefinition(
        qname="esrs:E5SecondaryMaterialConsumption",
        unit_id="tonne",
        period_type=PeriodType.DURATION,
    ),
    "E5RecycledContentPercent": ConceptDefinition(
        qname="esrs:E5RecycledMaterialShare",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E5RenewableMaterialSharePercent": ConceptDefinition(
        qname="esrs:E5RenewableMaterialShare",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E5CriticalMaterialsSharePercent": ConceptDefinition(
        qname="esrs:E5CriticalMaterialShare",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E5CircularityTargetPercent": ConceptDefinition(
        qname="esrs:E5CircularityTargetPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E5TargetGapPercent": ConceptDefinition(
        qname="esrs:E5CircularityTargetGapPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "E5DocumentationQualityPercent": ConceptDefinition(
        qname="esrs:E5DocumentationQualityPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # ESRS 2 SBM Strategy and business model                             #
    # ------------------------------------------------------------------ #
    "SBMBusinessModelNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfBusinessModelAndValueChainExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "SBMStrategyNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfElementsOfStrategyThatRelateToOrImpactSustainabilityMattersBusinessModelAndValueChainExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "SBMResilienceNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfResultsOfResilienceAnalysisExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "SBMStakeholderNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfStakeholderEngagementExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "SBMTransitionPlanNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfProcessInRelationToClimaterelatedTransitionRisksAndOpportunitiesInOwnOperationsAndAlongUpstreamAndDownstreamValueChainExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "SBMResponsibilitiesTable": ConceptDefinition(
        qname="esrs:StrategyBusinessModelAndValueChainTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # ESRS 2 GOV Governance                                              #
    # ------------------------------------------------------------------ #
    "GOVOversightNarrative": ConceptDefinition(
        qname="esrs:InformationAboutRolesAndResponsibilitiesOfAdministrativeManagementAndSupervisoryBodiesExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "GOVManagementNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfHowAdministrativeManagementAndSupervisoryBodiesAreInformedAboutSustainabilityMattersAndHowTheseMattersWereAddressedExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "GOVCompetenceNarrative": ConceptDefinition(
        qname="esrs:InformationAboutExtentToWhichTrainingIsGivenToMembersOfAdministrativeManagementAndSupervisoryBodiesExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "GOVReportingNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfPeriodicReportingOfFindingsOfRiskAssessmentAndInternalControlsToAdministrativeManagementAndSupervisoryBodiesInRelationToSustainabilityReportingProcessExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "GOVIncentiveNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfSpecificSustainabilityrelatedTargetsAndOrImpactsUsedToAssessPerformanceOfMembersOfAdministrativeManagementAndSupervisoryBodiesExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "GOVResponsibilitiesTable": ConceptDefinition(
        qname="esrs:RolesAndResponsibilitiesOfAdministrativeManagementAndSupervisoryBodiesTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # ESRS 2 IRO Impacts, risks and opportunities                        #
    # ------------------------------------------------------------------ #
    "IROProcessNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfProcessToIdentifyAssessPrioritiseAndMonitorPotentialAndActualImpactsOnPeopleAndEnvironmentInformedByDueDiligenceProcessExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "IROIntegrationNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfHowAdministrativeManagementAndSupervisoryBodiesConsiderImpactsRisksAndOpportunitiesWhenOverseeingStrategyDecisionsOnMajorTransactionsAndRiskManagementProcessExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "IROStakeholderNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfHowStakeholderEngagementIsOrganisedExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "IRODueDiligenceNarrative": ConceptDefinition(
        qname="esrs:InformationAboutMethodologiesAssumptionsAndToolsUsedToScreenAssetsAndOrActivitiesInOrderToIdentifyActualAndPotentialImpactsRisksAndOpportunitiesInEitherOwnOperationsOrValueChainExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "IROMonitoringNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfMetricsUsedToEvaluatePerformanceAndEffectivenessInRelationToMaterialImpactRiskOrOpportunityExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "IROActionsTable": ConceptDefinition(
        qname="esrs:ProcessToIdentifyAndAssessMaterialImpactsRisksAndOpportunitiesESRS2Table",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # ESRS 2 MDR Metrics and targets                                     #
    # ------------------------------------------------------------------ #
    "MRIntensityNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfMetricsScopeExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRTargetsNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfAnyTimeboundTargetsSetRelatedToSustainabilityMattersAssessedToBeMaterialPhaseinAndProgressMadeTowardsAchievingThoseTargetsExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRDataQualityNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfExtentToWhichDataAndProcessesThatAreUsedForSustainabilityReportingPurposesHaveBeenVerifiedByExternalAssuranceProviderAndFoundToConformToCorrespondingIsoNOIecOrCenNOCenelecStandardExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRAssuranceNarrative": ConceptDefinition(
        qname="esrs:TypeOfExternalBodyOtherThanAssuranceProviderThatProvidesValidationExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRTransitionPlanNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfTransitionPlanForClimateChangeMitigationExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRFinancialEffectsNarrative": ConceptDefinition(
        qname="esrs:DisclosureOfAnticipatedFinancialEffectsOfMaterialRisksAndOpportunitiesOnFinancialPerformanceAndCashFlowsOverShortMediumAndLongtermExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRMetricsNarrative": ConceptDefinition(
        qname="esrs:DescriptionOfMetricsUsedToEvaluatePerformanceAndEffectivenessInRelationToMaterialImpactRiskOrOpportunityExplanatory",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRTransitionMeasuresTable": ConceptDefinition(
        qname="esrs:TransitionPlanForClimateChangeMitigationTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRFinancialEffectsTable": ConceptDefinition(
        qname="esrs:AnticipatedFinancialEffectsFromMaterialPhysicalAndTransitionRisksDetailedTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRRemovalProjectsTable": ConceptDefinition(
        qname="esrs:GHGRemovalsAndStorageActivityTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "MRRequirementsTable": ConceptDefinition(
        qname="esrs:MinimumDisclosureRequirementMetricsListOfESRSMetricsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # S1 Own workforce                                                   #
    # ------------------------------------------------------------------ #
    "S1TotalHeadcount": ConceptDefinition(
        qname="esrs:S1TotalEmployees",
        unit_id="pure",
        period_type=PeriodType.INSTANT,
    ),
    "S1TotalFte": ConceptDefinition(
        qname="esrs:S1TotalFullTimeEquivalentEmployees",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S1SegmentHeadcountTotal": ConceptDefinition(
        qname="esrs:S1SegmentHeadcountTotal",
        unit_id="pure",
        period_type=PeriodType.INSTANT,
    ),
    "S1SegmentFemaleHeadcountEstimate": ConceptDefinition(
        qname="esrs:S1SegmentFemaleHeadcountEstimate",
        unit_id="pure",
        period_type=PeriodType.INSTANT,
    ),
    "S1DataCoveragePercent": ConceptDefinition(
        qname="esrs:S1DataCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1FteCoveragePercent": ConceptDefinition(
        qname="esrs:S1FteDataCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1EmploymentContractHeadcountTotal": ConceptDefinition(
        qname="esrs:S1EmploymentContractHeadcountTotal",
        unit_id="pure",
        period_type=PeriodType.INSTANT,
    ),
    "S1EmploymentContractFteTotal": ConceptDefinition(
        qname="esrs:S1EmploymentContractFteTotal",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S1EmploymentStatusHeadcountTotal": ConceptDefinition(
        qname="esrs:S1EmploymentStatusHeadcountTotal",
        unit_id="pure",
        period_type=PeriodType.INSTANT,
    ),
    "S1EmploymentStatusFteTotal": ConceptDefinition(
        qname="esrs:S1EmploymentStatusFteTotal",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S1CollectiveAgreementCoveragePercent": ConceptDefinition(
        qname="esrs:S1CollectiveAgreementCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1AverageFemalePercent": ConceptDefinition(
        qname="esrs:S1FemaleSharePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1HasCollectiveAgreements": ConceptDefinition(
        qname="esrs:S1CollectiveAgreementsInPlace",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S1GenderPayGapPercentTotal": ConceptDefinition(
        qname="esrs:S1GenderPayGapOverallPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1GenderPayGapPercentManagement": ConceptDefinition(
        qname="esrs:S1GenderPayGapManagementPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1GenderPayGapPercentOperations": ConceptDefinition(
        qname="esrs:S1GenderPayGapOtherEmployeesPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1AbsenteeismRatePercent": ConceptDefinition(
        qname="esrs:S1AbsenteeismRatePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1LostTimeInjuryFrequencyRate": ConceptDefinition(
        qname="esrs:S1LostTimeInjuryFrequencyRate",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S1WorkRelatedAccidentsCount": ConceptDefinition(
        qname="esrs:S1WorkRelatedAccidentsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S1WorkRelatedFatalitiesCount": ConceptDefinition(
        qname="esrs:S1WorkRelatedFatalitiesCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S1AverageTrainingHoursPerEmployee": ConceptDefinition(
        qname="esrs:S1AverageTrainingHoursPerEmployee",
        unit_id="hour",
        period_type=PeriodType.DURATION,
    ),
    "S1AverageWeeklyHours": ConceptDefinition(
        qname="esrs:S1AverageWeeklyWorkingTimeHours",
        unit_id="hour",
        period_type=PeriodType.DURATION,
    ),
    "S1TrainingCoveragePercent": ConceptDefinition(
        qname="esrs:S1TrainingCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1SocialProtectionCoveragePercent": ConceptDefinition(
        qname="esrs:S1SocialProtectionCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1HealthCareCoveragePercent": ConceptDefinition(
        qname="esrs:S1HealthCareCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1PensionPlanCoveragePercent": ConceptDefinition(
        qname="esrs:S1PensionPlanCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S1HeadcountBreakdownTable": ConceptDefinition(
        qname="esrs:S1HeadcountBreakdownTable",
        unit_id=None,
        period_type=PeriodType.INSTANT,
    ),
    "S1EmploymentContractBreakdownTable": ConceptDefinition(
        qname="esrs:S1EmploymentContractBreakdownTable",
        unit_id=None,
        period_type=PeriodType.INSTANT,
    ),
    "S1EmploymentStatusBreakdownTable": ConceptDefinition(
        qname="esrs:S1EmploymentStatusBreakdownTable",
        unit_id=None,
        period_type=PeriodType.INSTANT,
    ),
    # ------------------------------------------------------------------ #
    # S2 Workers in the value chain                                      #
    # ------------------------------------------------------------------ #
    "S2ValueChainWorkersCount": ConceptDefinition(
        qname="esrs:S2ValueChainWorkersCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S2WorkersAtRiskCount": ConceptDefinition(
        qname="esrs:S2WorkersAtRiskCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S2ValueChainCoveragePercent": ConceptDefinition(
        qname="esrs:S2ValueChainCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S2HighRiskSupplierSharePercent": ConceptDefinition(
        qname="esrs:S2HighRiskSupplierSharePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S2LivingWageCoveragePercent": ConceptDefinition(
        qname="esrs:S2LivingWageCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S2CollectiveBargainingCoveragePercent": ConceptDefinition(
        qname="esrs:S2CollectiveBargainingCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S2SocialAuditsCompletedPercent": ConceptDefinition(
        qname="esrs:S2SocialAuditCompletionPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S2GrievancesOpenCount": ConceptDefinition(
        qname="esrs:S2OpenGrievancesCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S2GrievanceMechanismForWorkers": ConceptDefinition(
        qname="esrs:S2GrievanceMechanismForWorkers",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S2IncidentsCount": ConceptDefinition(
        qname="esrs:S2IncidentCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S2WorkersAffectedTotal": ConceptDefinition(
        qname="esrs:S2WorkersAffectedTotal",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S2SocialDialogueNarrative": ConceptDefinition(
        qname="esrs:S2SocialDialogueNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S2RemediationNarrative": ConceptDefinition(
        qname="esrs:S2RemediationNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S2IncidentsTable": ConceptDefinition(
        qname="esrs:S2IncidentsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # S3 Affected communities                                            #
    # ------------------------------------------------------------------ #
    "S3CommunitiesIdentifiedCount": ConceptDefinition(
        qname="esrs:S3CommunitiesIdentifiedCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S3ImpactAssessmentsCoveragePercent": ConceptDefinition(
        qname="esrs:S3ImpactAssessmentCoveragePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S3HighRiskCommunitySharePercent": ConceptDefinition(
        qname="esrs:S3HighRiskCommunitySharePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S3GrievancesOpenCount": ConceptDefinition(
        qname="esrs:S3OpenGrievancesCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S3ImpactsCount": ConceptDefinition(
        qname="esrs:S3ImpactsRecordedCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S3HouseholdsAffectedTotal": ConceptDefinition(
        qname="esrs:S3HouseholdsAffectedTotal",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S3EngagementNarrative": ConceptDefinition(
        qname="esrs:S3EngagementNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S3RemedyNarrative": ConceptDefinition(
        qname="esrs:S3RemedyNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S3CommunityImpactsTable": ConceptDefinition(
        qname="esrs:S3CommunityImpactsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # S4 Consumers and end-users                                         #
    # ------------------------------------------------------------------ #
    "S4ProductsAssessedPercent": ConceptDefinition(
        qname="esrs:S4ProductsAssessedPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S4SevereIncidentsCount": ConceptDefinition(
        qname="esrs:S4SevereIncidentsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S4RecallsCount": ConceptDefinition(
        qname="esrs:S4ProductRecallsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S4ComplaintsResolvedPercent": ConceptDefinition(
        qname="esrs:S4ComplaintsResolvedPercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "S4DataBreachesCount": ConceptDefinition(
        qname="esrs:S4DataBreachesCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S4GrievanceMechanismInPlace": ConceptDefinition(
        qname="esrs:S4GrievanceMechanismInPlace",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S4EscalationTimeframeDays": ConceptDefinition(
        qname="esrs:S4GrievanceEscalationTimeframeDays",
        unit_id="day",
        period_type=PeriodType.DURATION,
    ),
    "S4IssuesCount": ConceptDefinition(
        qname="esrs:S4IssuesRecordedCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S4UsersAffectedTotal": ConceptDefinition(
        qname="esrs:S4UsersAffectedTotal",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "S4VulnerableUsersNarrative": ConceptDefinition(
        qname="esrs:S4VulnerableUsersNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S4ConsumerEngagementNarrative": ConceptDefinition(
        qname="esrs:S4ConsumerEngagementNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "S4ConsumerIssuesTable": ConceptDefinition(
        qname="esrs:S4ConsumerIssuesTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # G1 Business conduct                                                #
    # ------------------------------------------------------------------ #
    "G1PolicyCount": ConceptDefinition(
        qname="esrs:G1PolicyCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "G1TargetCount": ConceptDefinition(
        qname="esrs:G1TargetCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "G1PolicyAverageScore": ConceptDefinition(
        qname="esrs:G1PolicyAverageScorePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "G1TargetAverageScore": ConceptDefinition(
        qname="esrs:G1TargetAverageScorePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "G1OversightScore": ConceptDefinition(
        qname="esrs:G1OversightScorePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "G1BoardOversight": ConceptDefinition(
        qname="esrs:G1BoardOversight",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "G1GovernanceNarrative": ConceptDefinition(
        qname="esrs:G1GovernanceNarrative",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "G1PoliciesTable": ConceptDefinition(
        qname="esrs:G1PoliciesTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "G1TargetsTable": ConceptDefinition(
        qname="esrs:G1TargetsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # D1 Reporting boundary and methodology                              #
    # ------------------------------------------------------------------ #
    "D1OrganizationalBoundary": ConceptDefinition(
        qname="esrs:D1OrganizationalBoundary",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1Scope2Method": ConceptDefinition(
        qname="esrs:D1Scope2Method",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1Scope3ScreeningCompleted": ConceptDefinition(
        qname="esrs:D1Scope3ScreeningCompleted",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1DataQuality": ConceptDefinition(
        qname="esrs:D1DataQuality",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1MaterialityAssessmentDescription": ConceptDefinition(
        qname="esrs:D1MaterialityAssessmentDescription",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1StrategySummary": ConceptDefinition(
        qname="esrs:D1StrategySummary",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1ValueChainCoverage": ConceptDefinition(
        qname="esrs:D1ValueChainCoverage",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1QuantitativeTargets": ConceptDefinition(
        qname="esrs:D1QuantitativeTargets",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1TimeHorizonsCoveredCount": ConceptDefinition(
        qname="esrs:D1TimeHorizonsCoveredCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "D1KpiCount": ConceptDefinition(
        qname="esrs:D1KpiCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "D1HasEsgCommittee": ConceptDefinition(
        qname="esrs:D1HasEsgCommittee",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1StrategyNarrativesTable": ConceptDefinition(
        qname="esrs:D1StrategyNarrativesTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1GovernanceNarrativesTable": ConceptDefinition(
        qname="esrs:D1GovernanceNarrativesTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1ImpactsProcessTable": ConceptDefinition(
        qname="esrs:D1ImpactsProcessTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1TargetsNarrativesTable": ConceptDefinition(
        qname="esrs:D1TargetsNarrativesTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D1KpiOverviewTable": ConceptDefinition(
        qname="esrs:D1KpiOverviewTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    # ------------------------------------------------------------------ #
    # D2 Double materiality assessment                                   #
    # ------------------------------------------------------------------ #
    "D2ValidTopicsCount": ConceptDefinition(
        qname="esrs:D2ValidTopicsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "D2PrioritisedTopicsCount": ConceptDefinition(
        qname="esrs:D2PrioritisedTopicsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "D2AttentionTopicsCount": ConceptDefinition(
        qname="esrs:D2AttentionTopicsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "D2GapAlertsCount": ConceptDefinition(
        qname="esrs:D2GapAlertsCount",
        unit_id="pure",
        period_type=PeriodType.DURATION,
    ),
    "D2AverageWeightedScore": ConceptDefinition(
        qname="esrs:D2AverageWeightedScorePercent",
        unit_id="percent",
        period_type=PeriodType.DURATION,
    ),
    "D2MaterialTopicsTable": ConceptDefinition(
        qname="esrs:D2MaterialTopicsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
    "D2GapAlertsTable": ConceptDefinition(
        qname="esrs:D2GapAlertsTable",
        unit_id=None,
        period_type=PeriodType.DURATION,
    ),
}

ESRS_CONCEPTS: Final[Mapping[str, ConceptDefinition]] = MappingProxyType(_ESRS_CONCEPTS)

EMISSION_CONCEPT_KEYS: Final[tuple[str, ...]] = (
    "scope1",
    "scope2LocationBased",
    "scope2MarketBased",
    "scope3",
    "totalLocationBased",
    "totalMarketBased",
)

NET_REVENUE_INTENSITY_LOCATION_KEY: Final[str] = "E1IntensityLocationBasedPerNetRevenue"
NET_REVENUE_INTENSITY_MARKET_KEY: Final[str] = "E1IntensityMarketBasedPerNetRevenue"


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def is_concept_key(key: str) -> bool:
    """Return True if ``key`` is registered in the ESRS taxonomy registry."""
    return key in ESRS_CONCEPTS


def get_concept_definition(key: str) -> ConceptDefinition:
    """Return the taxonomy definition registered for a concept key.

    Args:
        key:
            Concept key as used by the calculation modules (e.g., "scope1",
            "S1TotalHeadcount").

    Returns:
        The registered :class:`ConceptDefinition`.

    Raises:
        UnknownConceptError:
            If ``key`` is not registered.
    """
    try:
        return ESRS_CONCEPTS[key]
    except KeyError:
        raise UnknownConceptError(
            f"Unknown ESRS concept key: {key}",
            details={"concept_key": key},
        ) from None


def iter_concept_keys() -> tuple[str, ...]:
    """Return all registered concept keys in declaration order."""
    return tuple(ESRS_CONCEPTS)


def iter_emission_concepts() -> Iterator[tuple[str, ConceptDefinition]]:
    """Yield ``(key, definition)`` for the mandatory emission concepts, in order."""
    for key in EMISSION_CONCEPT_KEYS:
        yield key, get_concept_definition(key)


__all__ = [
    "ESRS_NAMESPACE",
    "ESRS_PREFIX",
    "ESRS_CONCEPTS",
    "EMISSION_CONCEPT_KEYS",
    "NET_REVENUE_INTENSITY_LOCATION_KEY",
    "NET_REVENUE_INTENSITY_MARKET_KEY",
    "is_concept_key",
    "get_concept_definition",
    "iter_concept_keys",
    "iter_emission_concepts",
]
