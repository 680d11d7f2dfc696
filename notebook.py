# /// script
# [tool.marimo.runtime]
# auto_instantiate = false
# ///

import marimo

__generated_with = "0.18.4"
app = marimo.App(width="medium")


@app.cell
def _():
    import marimo as mo
    return (mo,)


@app.cell(hide_code=True)
def _(mo):
    mo.md(r"""
    # How Old Are People? Posteriors with PyMC

    This notebook estimates one number, the average age of a population, from a small random sample, and then uses the fitted model to answer questions about individual people.

    - **The Data**: a random sample of people from a much larger population
    - **The Model**: a linear regression with no predictors, `age ~ 1`
    - **Posterior Draws**: thousands of plausible values for the average age
    - **Posterior Predictive**: simulated ages for individual people

    We never write a sampler ourselves. PyMC fits the model and stores the draws; our job is to ask the draws good questions.
    """)
    return


@app.cell
def _():
    import matplotlib.pyplot as plt
    import arviz as az

    from age_posterior.config import AGE_THRESHOLD, SAMPLE_SIZE, SamplerConfig
    from age_posterior.data import describe_ages, load_population, sample_people
    from age_posterior.model import (
        INTERCEPT,
        define_intercept_model,
        fit_intercept_model,
        posterior_draws,
        posterior_interval,
        summarize_posterior,
    )
    from age_posterior.plots import (
        plot_posterior_histogram,
        plot_predictive_totals,
        plot_sample_ages,
    )
    from age_posterior.predictive import (
        posterior_predict,
        predict_new_people,
        probability_total_exceeds,
        row_totals,
    )

    az.style.use("arviz-darkgrid")

    SEED = 10
    return (
        AGE_THRESHOLD,
        INTERCEPT,
        SAMPLE_SIZE,
        SEED,
        SamplerConfig,
        define_intercept_model,
        describe_ages,
        fit_intercept_model,
        load_population,
        plot_posterior_histogram,
        plot_predictive_totals,
        plot_sample_ages,
        plt,
        posterior_draws,
        posterior_interval,
        posterior_predict,
        predict_new_people,
        probability_total_exceeds,
        row_totals,
        sample_people,
        summarize_posterior,
    )


@app.cell(hide_code=True)
def _(mo):
    mo.md(r"""
    ## The Data

    The population is a survey-style table with one row per person. Only `age` matters today.
    """)
    return


@app.cell
def _(load_population):
    population = load_population()
    population
    return (population,)


@app.cell
def _(SAMPLE_SIZE, mo):
    sample_size_slider = mo.ui.slider(
        start=10,
        stop=200,
        step=10,
        value=SAMPLE_SIZE,
        label="Sample size",
        show_value=True,
    )

    sample_size_slider
    return (sample_size_slider,)


@app.cell
def _(mo, sample_size_slider):
    mo.md(f"""
    ```python
    sample: pd.DataFrame = sample_people(population, n={sample_size_slider.value})
    ```
    """)
    return


@app.cell
def _(SEED, population, sample_people, sample_size_slider):
    sample = sample_people(population, n=sample_size_slider.value, random_seed=SEED)
    sample
    return (sample,)


@app.cell
def _(describe_ages, mo, population, sample):
    ages = describe_ages(sample)
    mo.md(f"""
    We drew {ages["count"]} people out of {len(population):,}. Their ages run from {ages["min"]:.0f} to {ages["max"]:.0f}, with a mean of {ages["mean"]:.1f} and a standard deviation of {ages["sd"]:.1f}.

    The sample mean is a single number. What we want is a range of plausible values for the **population** average, with a sense of how plausible each one is.
    """)
    return


@app.cell
def _(plot_sample_ages, sample):
    plot_sample_ages(sample)
    return


@app.cell(hide_code=True)
def _(mo):
    mo.md(r"""
    ## The Model

    A regression with no predictors estimates one intercept: the average age. A second term, `sigma`, describes how far individual ages spread around that average.

    ```python
    with pm.Model(coords={"person": sample["person_id"]}) as model:
        intercept = pm.Normal("intercept", mu=..., sigma=...)
        sigma = pm.Exponential("sigma", lam=...)
        pm.Normal("age", mu=intercept, sigma=sigma, observed=sample["age"], dims="person")
    ```

    The priors are weak and scaled to the data, so the sample does almost all of the talking.
    """)
    return


@app.cell
def _(define_intercept_model, sample):
    model = define_intercept_model(sample)

    model
    return (model,)


@app.cell
def _(mo):
    mo.md(r"""
    ## Sampling Model

    One call does the fitting. By default we get 4 chains of 1,000 draws each.

    ```python
    model, idata = fit_intercept_model(sample)
    ```
    """)
    return


@app.cell
def _(mo):
    run_button = mo.ui.run_button(label="click to sample")

    run_button
    return (run_button,)


@app.cell
def _():
    idatas: dict[int, tuple] = {}
    return (idatas,)


@app.cell
def _(
    SEED,
    SamplerConfig,
    fit_intercept_model,
    idatas: "dict[int, tuple]",
    mo,
    run_button,
    sample,
):
    # Sample, or reuse an earlier fit on the same sample
    has_cached_fit = len(sample) in idatas

    mo.stop(
        not (has_cached_fit or run_button.value),
        mo.callout(
            f"The model has not been fit to the sample of {len(sample)} people yet. Click the button above to sample.",
            kind="warn",
        ),
    )

    if not has_cached_fit:
        idatas[len(sample)] = fit_intercept_model(
            sample, sampler=SamplerConfig(random_seed=SEED)
        )
    fitted_model, idata = idatas[len(sample)]
    return fitted_model, idata


@app.cell(hide_code=True)
def _(mo):
    mo.md(r"""
    ## Posterior Draws

    Every row below is one draw: one plausible pair of values for the intercept and for `sigma`.

    ```python
    draws = posterior_draws(idata)
    ```
    """)
    return


@app.cell
def _(idata, posterior_draws):
    draws = posterior_draws(idata)
    draws
    return (draws,)


@app.cell
def _(idata, summarize_posterior):
    summarize_posterior(idata)
    return


@app.cell
def _(INTERCEPT, draws, mo, posterior_interval, sample):
    lower, upper = posterior_interval(draws, INTERCEPT, prob=0.95)
    mo.md(f"""
    We have {len(draws):,} draws. The posterior mean of the average age is {draws[INTERCEPT].mean():.1f}, and 95% of the draws fall between **{lower:.1f}** and **{upper:.1f}**.

    Compare that interval with the sample mean of {sample["age"].mean():.1f}: the sample tells us roughly where the average is, and the posterior tells us how sure to be.
    """)
    return


@app.cell
def _(draws, plot_posterior_histogram, plt):
    _, _ax = plt.subplots(figsize=(8, 5))
    plot_posterior_histogram(draws, ax=_ax)
    plt.gca()
    return


@app.cell(hide_code=True)
def _(mo):
    mo.md(r"""
    ## More than just the average

    The posterior for the intercept answers questions about the **average** person. Questions about **individual** people need the posterior predictive: for each draw, simulate an age for each person using that draw's intercept and `sigma`.

    ```python
    predictions = posterior_predict(model, idata)
    ```

    The result has one row per draw and one column per person in the sample.
    """)
    return


@app.cell
def _(SEED, fitted_model, idata, posterior_predict):
    predictions = posterior_predict(fitted_model, idata, random_seed=SEED)
    predictions
    return (predictions,)


@app.cell
def _(AGE_THRESHOLD, mo):
    threshold_slider = mo.ui.slider(
        start=60,
        stop=240,
        step=5,
        value=AGE_THRESHOLD,
        label="Total age threshold",
        show_value=True,
    )

    threshold_slider
    return (threshold_slider,)


@app.cell
def _(mo, predictions, probability_total_exceeds, threshold_slider):
    probability = probability_total_exceeds(predictions, threshold=threshold_slider.value)
    _people = ", ".join(str(person) for person in predictions.columns[:3])
    mo.md(f"""
    Take the first three people in the sample ({_people}). Add up their simulated ages within each draw, and count how often the total is above {threshold_slider.value}.

    ```python
    totals = predictions.iloc[:, :3].sum(axis=1)
    (totals > {threshold_slider.value}).mean()
    ```

    The probability that their combined age exceeds {threshold_slider.value} is **{probability:.1%}**.
    """)
    return


@app.cell
def _(plot_predictive_totals, plt, predictions, row_totals, threshold_slider):
    _, _ax = plt.subplots(figsize=(8, 5))
    plot_predictive_totals(row_totals(predictions), threshold_slider.value, ax=_ax)
    plt.gca()
    return


@app.cell
def _(
    SEED,
    fitted_model,
    idata,
    mo,
    predict_new_people,
    probability_total_exceeds,
    threshold_slider,
):
    new_people = predict_new_people(fitted_model, idata, n_people=3, random_seed=SEED)
    _probability = probability_total_exceeds(new_people, threshold=threshold_slider.value)
    mo.md(f"""
    The same question works for three people we have never met. Their predictions come from the same draws, so the answer, **{_probability:.1%}**, should be close to the one above.
    """)
    return


@app.cell
def _(mo):
    mo.md("""
    <br>
    <br>
    ---
    ## Resources

    Read about posterior predictive checks in the [PyMC documentation](https://www.pymc.io/projects/docs/en/stable/learn/core_notebooks/posterior_predictive.html).

    [The Arviz Project](https://www.arviz.org/en/latest/) provides the tools used here to summarise draws.

    Render this notebook to HTML with `marimo export html notebook.py -o age.html`.
    """)
    return


if __name__ == "__main__":
    app.run()
