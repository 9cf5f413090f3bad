from __future__ import annotations

import re

DATASET_VARIABLE = "dataset"

ADDITIONAL_INSTRUCTIONS_LEAD = "\n\nAdditional instructions:\n"

_MARKUP_CHARS = re.compile(r"[`*]")

_ANALYSIS_TEMPLATE: tuple[str, ...] = (
    "Generate a comprehensive scientific analysis in markdown format about the dataset "
    "with the following summary statistics:\n\n",
    "{summary}",
    "\n\nThe analysis should provide a thorough and accurate description of the dataset, "
    "including key information, important insights, key observations, and detailed analysis. "
    "Use plain text in tables without any * or ` characters. "
    "Tables should always be centered using markdown syntax like this:\n\n",
    "| Header1 |    Header2    |   Header3   |\n",
    "|:-------:|:-------------:|------------:|\n",
    "|  Cell1  |    Cell2      |       Cell3 |\n\n",
    "The sections should be:\n",
    "1. **Title**: Generate a concise and descriptive title for the analysis. "
    "The title should follow the format: # Subject. Ensure that the title accurately reflects "
    "the content and main focus of the analysis.\n",
    "2. **Abstract**: Provide a brief summary of the analysis's objectives, methods, key findings, and conclusions.\n",
    "3. **Introduction**: Introduce the dataset, its origin, and its significance in the field of data analysis. "
    "Mention any relevant background information.\n",
    "4. **Data Summary**: Include a detailed summary of the dataset, with tables and descriptive statistics. "
    "Highlight any notable patterns, trends, and key observations in the data.\n",
    "5. **Attributes Explanation**: Explain every attribute and its data type in the dataset.\n",
    "6. **Data Analysis Explanation**: Explain the methods used for data analysis, including any statistical tests, "
    "visualizations, or machine learning algorithms applied. Provide detailed interpretations of the results.\n",
    "7. **Possible Interpretation**: Offer potential explanations or interpretations for the findings. "
    "Discuss any theories or hypotheses that might explain the observed patterns or results.\n",
    "8. **Suggested Further Analyses**: Suggest additional analyses or experiments that could be performed "
    "on the dataset to gain deeper insights.\n",
    "9. **Conclusion**: Summarize the key findings, key observations, and their implications. "
    "Discuss any limitations of the analysis and potential areas for future research.\n",
    "10. **Possible References**: List any references or sources cited in the analysis.\n",
    "Ensure that the markdown formatting is correct, the content is well-organized and scientifically rigorous, "
    "and there should be no '---' above or below headers as these break the markdown preview. ",
    "Use backticks for variable names to structure the content better, e.g. `var1` or `var2`. ",
    "Do not use bold, italic or back quotes in tables, ",
    "but DO USE bold, italic and back quotes in the rest of the markdown for better structure. ",
    "Highlight important parts and keywords. ",
    "Do not insert any .png or html tags as these are not wanted in the .md",
)

_DATASET_RULE = (
    f"The data is created in the variable `{DATASET_VARIABLE}`. Reference it in your code. "
    f"THIS IS VERY important. DO NOT OVERWRITE THE `{DATASET_VARIABLE}` variable (1:1)."
)

_VISUALIZATION_TEMPLATE: tuple[str, ...] = (
    "You are provided with the following dataset summary: We are working in R \n\n",
    "{summary}",
    "\n\nYour tasks are enlisted below finish all of them one after another \n",
    "- Explain what you are doing \n",
    "- Write your R code in Codeblocks with ```r \n",
    f"- {_DATASET_RULE}\n",
    "- Analyze the data and write an explanation about it \n",
    "- Now create plots with ggplot2 fitting to the analysis you did before. "
    "Describe the plot and why you chose it.\n",
    "- Structure your Response well with # Headers \n",
    "- Write an if statement at the beginning to check if all the needed libraries are already installed "
    "and if not, install them.\n",
    "- Always use the variable names, never use abbreviations.\n",
    "- Try to ALWAYS cover all variables and correlations in a plot\n",
    "- For every Plot write a Description and explanation on why this plot fits to the data\n",
    "- Write an analysis of the data at the beginning\n",
    "- Do not use grid.arrange\n",
    "- Follow best practices while using colors for data visualization:\n",
    "  * Use Qualitative palettes for categorical data.\n",
    "  * Use Sequential palettes for numerical data with order.\n",
    "  * Use Diverging palettes for numerical data with a meaningful midpoint.\n",
    "  * Leverage the meaningfulness of color.\n",
    "  * Avoid unnecessary usage of color.\n",
    "  * Be consistent with color across charts.\n",
    "  * Try to not use bright neon colors\n",
    "Think about using: scatter plots, line charts, box plots, heatmaps, bar charts, pie charts, histograms, "
    "area charts or barplots depending on the best usecase. ",
    "Every attribute that can be plotted should be plotted. ",
    f"{_DATASET_RULE} ",
    "Reference the dataset like this:\n",
    f"data <- {DATASET_VARIABLE}",
)

_VALIDATION_TEMPLATE = (
    "Validate and reformat the following markdown document. "
    "Fix broken headers, lists and tables, keep every section and all of the content, "
    "and make sure there is no '---' directly above or below a header. "
    "Tables must stay centered and must not contain bold, italic or back quotes. "
    "Return only the corrected markdown, without wrapping it in a code block.\n\n"
)


def strip_markup(summary: str) -> str:
    """Remove backticks and asterisks so the summary cannot be read as formatting."""
    return _MARKUP_CHARS.sub("", summary)


def _render(template: tuple[str, ...], summary: str, extra: str) -> str:
    body = "".join(template).replace("{summary}", strip_markup(summary))
    if extra:
        body += ADDITIONAL_INSTRUCTIONS_LEAD + extra
    return body


def build_analysis_prompt(summary: str, extra: str = "") -> str:
    """Prompt for the markdown scientific analysis."""
    return _render(_ANALYSIS_TEMPLATE, summary, extra)


def build_visualization_prompt(summary: str, extra: str = "") -> str:
    """Prompt for the ggplot2 visualization walkthrough.

    Generated code is told to use the `dataset` variable and never reassign it.
    Nothing checks that it complies.
    """
    return _render(_VISUALIZATION_TEMPLATE, summary, extra)


def build_validation_prompt(markdown: str) -> str:
    """Second-pass prompt: the generated markdown is sent back for repair."""
    return _VALIDATION_TEMPLATE + markdown
