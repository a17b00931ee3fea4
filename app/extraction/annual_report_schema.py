"""
Annual Report Label Schema - 2023 Form 10-K template
app/extraction/annual_report_schema.py

Static mapping of report sections (anchor text) to output keys and line
labels. Values are taken from the first numeric column, i.e. fiscal 2023.

Anchors and labels must match the extracted text exactly, including the
typographic apostrophe (’) and en dash (–) used in the filing.
"""

from typing import List

from app.extraction.schema import SectionGroup, line, segment, simple_line


ANNUAL_REPORT_SCHEMA: List[SectionGroup] = [
    SectionGroup(
        name="Assets",
        anchor="CONSOLIDATED BALANCE SHEETS",
        subgroups=[
            SectionGroup(name="Current_Assets", fields=[
                line("Cash_and_Cash_Equivalents", "Cash and cash equivalents"),
                line("Marketable_Securities", "Marketable securities"),
            ]),
            SectionGroup(name="Non_Current_Assets", fields=[
                line("Marketable_Securities", "Marketable securities"),
                line("Property_Plant_and_Equipment_Net", "Property, plant and equipment, net"),
            ]),
        ],
    ),
    SectionGroup(
        name="Liabilities_and_Shareholders_Equity",
        anchor="LIABILITIES AND SHAREHOLDERS’ EQUITY:",
        subgroups=[
            SectionGroup(name="Current_Liabilities", fields=[
                line("Accounts_Payable", "Accounts payable"),
                line("Other_Current_Liabilities", "Other current liabilities"),
            ]),
            SectionGroup(name="Non_Current_Liabilities", fields=[
                line("Term_Debt", "Term debt"),
                line("Other_Non_Current_Liabilities", "Other non-current liabilities"),
            ]),
        ],
    ),
    SectionGroup(
        name="Income_Statement_And_EPS",
        anchor="CONSOLIDATED STATEMENTS OF OPERATIONS",
        subgroups=[
            SectionGroup(name="Income_Statement", fields=[
                line("Products_Net_Sales", "Products"),
                line("Services_Net_Sales", "Services"),
                line("Total_Net_Sales", "Total net sales"),
                line("Total_Cost_of_Sales", "Total cost of sales"),
                line("Gross_Margin", "Gross margin"),
                line("Operating_Income", "Operating income"),
            ]),
            SectionGroup(name="Earnings_Per_Share", fields=[
                line("Basic_EPS", "Basic"),
                line("Diluted_EPS", "Diluted"),
            ]),
        ],
    ),
    SectionGroup(
        name="Comprehensive_Income_Statement",
        anchor="CONSOLIDATED STATEMENTS OF COMPREHENSIVE INCOME",
        fields=[
            line("Net_Income", "Net income"),
            line("Change_in_Foreign_Currency_Translation", "Change in foreign currency translation"),
            line("Change_in_Fair_Value_of_Derivative_Instruments", "Change in fair value of derivative instruments"),
            line("Total_Other_Comprehensive_Income_Loss", "Total other comprehensive income/(loss)"),
        ],
    ),
    SectionGroup(
        name="Shareholders_Equity_Statement",
        anchor="CONSOLIDATED STATEMENTS OF SHAREHOLDERS’ EQUITY",
        fields=[
            line("Beginning_Balances_Total_Shareholders_Equity", "Total shareholders’ equity, beginning balances"),
            line("Net_Income", "Net income"),
            line("Dividends_Declared", "Dividends and dividend equivalents declared"),
            line("Ending_Balances_Total_Shareholders_Equity", "Total shareholders’ equity, ending balances"),
        ],
    ),
    SectionGroup(
        name="Cash_Flow_Statement",
        anchor="CONSOLIDATED STATEMENTS OF CASH FLOWS",
        fields=[
            line("Net_Income", "Net income"),
            line("Depreciation_and_Amortization", "Depreciation and amortization"),
            line("Cash_Generated_by_Operating_Activities", "Cash generated by operating activities"),
            line("Cash_Used_in_Investing_Activities", "Cash used in investing activities"),
            line("Cash_Used_in_Financing_Activities", "Cash used in financing activities"),
        ],
    ),
    SectionGroup(
        name="Net_Sales_And_EPS",
        anchor="Note 3 – Earnings Per Share",
        subgroups=[
            SectionGroup(name="Net_Sales", fields=[
                line("iPhone", "iPhone (1) $"),
                line("Mac", "Mac (1)"),
                line("iPad", "iPad (1)"),
                line("Wearables_Home_and_Accessories", "Wearables, Home and Accessories (1)"),
                line("Services", "Services (2)"),
                line("Total_Net_Sales", "Total net sales $"),
            ]),
            SectionGroup(name="Earnings_Per_Share", fields=[
                line("Basic_Earnings_Per_Share", "Basic earnings per share"),
                line("Diluted_Earnings_Per_Share", "Diluted earnings per share"),
            ]),
        ],
    ),
    SectionGroup(
        name="Cash_Equivalents_And_Marketable_Securities",
        anchor="Cash, Cash Equivalents and Marketable Securities",
        subgroups=[
            SectionGroup(name="Level_1", fields=[
                line("Money_Market_Funds", "Money market funds"),
                line("Mutual_Funds_Equity_Securities", "Mutual funds and equity securities"),
            ]),
            SectionGroup(name="Level_2", fields=[
                line("U.S_Treasury_Securities", "U.S. Treasury securities"),
                line("Corporate_Debt_Securities", "Corporate debt securities"),
            ]),
        ],
    ),
    SectionGroup(
        name="Debt_Securities_And_Derivatives",
        anchor="Derivative Instruments and Hedging",
        subgroups=[
            SectionGroup(name="Non_Current_Marketable_Debt_Securities", fields=[
                simple_line("Due_After_1_Year_Through_5_Years", "Due after 1 year through 5 years"),
                simple_line("Due_After_10_Years", "Due after 10 years"),
                simple_line("Total_Fair_Value", "Total fair value"),
            ]),
            SectionGroup(name="Derivative_Instruments", subgroups=[
                SectionGroup(name="Accounting_Hedges", fields=[
                    simple_line("Foreign_Exchange_Contracts", "Foreign exchange contracts"),
                    simple_line("Interest_Rate_Contracts", "Interest rate contracts"),
                ]),
                SectionGroup(name="Non_Accounting_Hedges", fields=[
                    simple_line("Foreign_Exchange_Contracts", "Foreign exchange contracts"),
                ]),
            ]),
        ],
    ),
    SectionGroup(
        name="Hedged_Assets_And_Liabilities",
        anchor="Accounts Receivable",
        fields=[
            line("Marketable_Securities", "Current and non-current marketable securities"),
            line("Term_Debt", "Current and non-current term debt"),
        ],
    ),
    SectionGroup(
        name="Property_Plant_And_Equipment_And_Other_Details",
        anchor="Note 5 – Property, Plant and Equipment",
        fields=[
            line("Net_Property_Plant_And_Equipment", "Total property, plant and equipment, net"),
        ],
    ),
    SectionGroup(
        name="Income_Taxes",
        anchor="Note 7 – Income Taxes",
        fields=[
            line("Provision_For_Income_Taxes", "Provision for income taxes"),
        ],
    ),
    SectionGroup(
        name="Deferred_Tax_And_Uncertain_Positions",
        anchor="Deferred Tax Assets and Liabilities",
        subgroups=[
            SectionGroup(name="Deferred_Tax_Assets", fields=[
                line("Total_Deferred_Tax_Assets", "Total deferred tax assets"),
            ]),
            SectionGroup(name="Deferred_Tax_Liabilities", fields=[
                line("Total_Deferred_Tax_Liabilities", "Total deferred tax liabilities"),
            ]),
        ],
    ),
    SectionGroup(
        name="Commercial_Paper",
        anchor="Note 9 – Debt",
        fields=[
            line("Proceeds_Repayments_Net", "Proceeds from/(Repayments of) commercial paper, net"),
        ],
    ),
    SectionGroup(
        name="Lease_Liability_Maturities",
        anchor="Note 9 – Debt",
        fields=[
            line("Operating_Leases", "Total lease liabilities"),
        ],
    ),
    SectionGroup(
        name="Term_Debt",
        anchor="Note 10 – Shareholders’ Equity",
        fields=[
            line("Total_Term_Debt_Principal", "Total term debt principal"),
        ],
    ),
    SectionGroup(
        name="Common_Stock",
        anchor="Note 11 – Share-Based Compensation",
        fields=[
            line("Common_Stock_Beginning_Balance", "Common stock outstanding, beginning balances"),
            line("Common_Stock_Ending_Balance", "Common stock outstanding, ending balances"),
        ],
    ),
    SectionGroup(
        name="Share_Based_Compensation_And_Purchase_Obligations",
        anchor="Note 12 – Commitments, Contingencies and Supply Concentrations",
        fields=[
            line("Share_Based_Compensation_Expense", "Share-based compensation expense"),
        ],
    ),
    SectionGroup(
        name="Segment_Information_And_Geographic_Data",
        anchor="Note 13 – Segment Information and Geographic Data",
        fields=[
            segment("Americas", "Americas", "Net sales"),
            segment("Europe", "Europe", "Net sales"),
        ],
    ),
    SectionGroup(
        name="Net_Sales_And_Long_Lived_Assets",
        anchor="The U.S. and China were the only countries that accounted for more than 10%",
        fields=[
            line("Net_Sales", "Total net sales"),
        ],
    ),
]
